# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Failures a probe run can end with.

Every failure is terminal for the run. ConfigError maps to UNKNOWN, the
network failures map to CRITICAL.
"""


class ProbeError(Exception):
    """Base class; str(exc) is the message reported to the monitoring host."""


class ConfigError(ProbeError):
    """Invalid option values or config file."""


class ConnectError(ProbeError):
    """Dial, DNS or TLS handshake failure."""


class WriteError(ProbeError):
    """Send or quit payload could not be written."""


class ReadError(ProbeError):
    """Response could not be read."""


class ValidationError(ProbeError):
    """Response did not start with the expected string."""

    def __init__(self, response):
        super().__init__(f"Unexpected response from host/socket: {response}")
        self.response = response
