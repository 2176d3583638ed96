# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Probe request and how it is completed from service defaults.

Exchange fields left as None were not supplied by the user and are filled
from the service profile. An explicit empty string stays empty, which skips
that phase.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from .errors import ConfigError
from .escape import decode_escapes
from .services import lookup_service

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_BYTES = 32 * 1024
LINE_TERMINATOR = "\r\n"


@dataclass
class ProbeRequest:
    hostname: str = ""
    timeout: float = DEFAULT_TIMEOUT
    max_bytes: int = 0
    delay: float = 0.0
    warning: float = 0.0
    critical: float = 0.0
    escape: bool = False
    service: str = ""
    port: Optional[int] = None
    send: Optional[Union[str, bytes]] = None
    expect: Optional[str] = None
    quit: Optional[Union[str, bytes]] = None
    use_tls: Optional[bool] = None

    @property
    def read_limit(self):
        return self.max_bytes if self.max_bytes > 0 else DEFAULT_MAX_BYTES

    @property
    def address(self):
        return f"{self.hostname}:{self.port}"


def merge_defaults(request, profile):
    """Fill the unset exchange fields of ``request`` from ``profile``.

    User values win field by field. Port 0 counts as unset. The profile's
    TLS flag only applies when the user made no explicit SSL choice.
    """
    return replace(
        request,
        port=request.port if request.port else profile.port,
        send=profile.send if request.send is None else request.send,
        expect=profile.expect if request.expect is None else request.expect,
        quit=profile.quit if request.quit is None else request.quit,
        use_tls=profile.use_tls if request.use_tls is None else request.use_tls,
    )


def _as_text(value):
    # argv bytes that are not UTF-8 arrive as surrogate escapes; keep them as bytes
    if isinstance(value, bytes):
        return value.decode("utf-8", "surrogateescape")
    return value or ""


def finalize_payloads(request):
    """Apply escape decoding or the quit terminator, then encode the payloads."""
    send = _as_text(request.send)
    quit_ = _as_text(request.quit)
    if request.escape:
        send = decode_escapes(send)
        quit_ = decode_escapes(quit_)
    elif quit_ and not quit_.endswith(LINE_TERMINATOR):
        quit_ += LINE_TERMINATOR
    return replace(
        request,
        send=send.encode("utf-8", "surrogateescape"),
        quit=quit_.encode("utf-8", "surrogateescape"),
        expect=request.expect or "",
    )


def prepare(request):
    service = (request.service or "").upper()
    profile = lookup_service(service)
    logger.debug("service %r defaults: %s", service or None, profile)
    merged = merge_defaults(replace(request, service=service), profile)
    return finalize_payloads(merged)


def validate_request(request):
    for name in ("timeout", "delay", "max_bytes", "warning", "critical"):
        value = getattr(request, name)
        if value < 0:
            raise ConfigError(f"{name} must not be negative (got {value})")
    if request.port is not None and not 0 <= request.port <= 65535:
        raise ConfigError(f"port out of range: {request.port}")
    return request
