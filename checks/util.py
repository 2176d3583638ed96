# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

import time

from .errors import ReadError, WriteError


def to_socket_timeout(timeout):
    # 0 means no deadline, which is a blocking socket rather than settimeout(0)
    return timeout if timeout and timeout > 0 else None


def matches_prefix(value, expect):
    if not expect:
        return True
    return value.startswith(expect)


def write_payload(sock, payload, timeout, phase="send"):
    """Write ``payload`` fully; the timeout bounds the whole write."""
    sock.settimeout(to_socket_timeout(timeout))
    try:
        sock.sendall(payload)
    except OSError as exc:
        raise WriteError(f"{phase} failed: {exc}") from exc


def read_response(sock, limit, timeout):
    """Read until a short read or until ``limit`` bytes are buffered.

    One deadline of ``timeout`` seconds covers every read.
    """
    deadline = time.monotonic() + timeout if timeout and timeout > 0 else None
    data = b""
    while len(data) < limit:
        wanted = limit - len(data)
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise ReadError("receive failed: timed out")
            sock.settimeout(remaining)
        else:
            sock.settimeout(None)
        try:
            chunk = sock.recv(wanted)
        except OSError as exc:
            raise ReadError(f"receive failed: {exc}") from exc
        data += chunk
        if len(chunk) < wanted:
            break
    return data
