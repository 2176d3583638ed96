# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Default exchanges for well-known line-oriented services.

Example:
lookup_service("imap")
# ExchangeProfile(port=143, send="", expect="* OK", quit="a1 LOGOUT", use_tls=False)
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ExchangeProfile:
    port: int = 0
    send: str = ""
    expect: str = ""
    quit: str = ""
    use_tls: bool = False


SERVICES = MappingProxyType(
    {
        "FTP": ExchangeProfile(port=21, expect="220", quit="QUIT"),
        "POP": ExchangeProfile(port=110, expect="+OK", quit="QUIT"),
        "SPOP": ExchangeProfile(port=995, expect="+OK", quit="QUIT", use_tls=True),
        "IMAP": ExchangeProfile(port=143, expect="* OK", quit="a1 LOGOUT"),
        "SIMAP": ExchangeProfile(port=993, expect="* OK", quit="a1 LOGOUT", use_tls=True),
        "SMTP": ExchangeProfile(port=25, expect="220", quit="QUIT"),
        "SSMTP": ExchangeProfile(port=465, expect="220", quit="QUIT", use_tls=True),
    }
)

ZERO_PROFILE = ExchangeProfile()


def lookup_service(name):
    """Return the default exchange for ``name`` (any case), or the zero profile."""
    return SERVICES.get((name or "").upper(), ZERO_PROFILE)
