# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

import logging
import socket
import ssl

from .errors import ConnectError
from .util import to_socket_timeout

logger = logging.getLogger(__name__)


def dial(host, port, use_tls=False, timeout=0):
    """Open a plain or TLS stream connection to host:port.

    TLS uses the system trust store and checks the certificate against
    ``host``. Every failure is raised as ConnectError.
    """
    address = f"{host}:{port}"
    if not host:
        raise ConnectError(f"connect to {address} failed: missing hostname")
    if not port:
        raise ConnectError(f"connect to {address} failed: missing port")
    sock_timeout = to_socket_timeout(timeout)
    try:
        sock = socket.create_connection((host, port), timeout=sock_timeout)
    except (OSError, UnicodeError) as exc:
        # UnicodeError: host name labels that cannot be IDNA encoded
        raise ConnectError(f"connect to {address} failed: {exc}") from exc
    if not use_tls:
        logger.debug("connected to %s", address)
        return sock
    try:
        context = ssl.create_default_context()
        tls_sock = context.wrap_socket(sock, server_hostname=host)
    except (OSError, UnicodeError) as exc:
        sock.close()
        raise ConnectError(f"tls handshake with {address} failed: {exc}") from exc
    logger.debug("connected to %s using %s", address, tls_sock.version())
    return tls_sock
