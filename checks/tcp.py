# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""TCP exchange check.

Request fields (see checks.exchange.ProbeRequest):
- hostname (str, required)
- port (int, required unless the service has a default)
- service (str, optional; FTP, POP, SPOP, IMAP, SIMAP, SMTP, SSMTP)
- send (str, optional, payload sent after connect)
- expect (str, optional, response prefix)
- quit (str, optional, payload sent before closing; CRLF appended)
- use_tls (bool, optional, default from service)
- escape (bool, optional, decode \\n \\r \\t \\\\ in send/quit)
- timeout (float, optional, seconds per phase, default 10, 0 = none)
- max_bytes (int, optional, default 32768)
- delay (float, optional, seconds to wait before connecting)
- warning / critical (float, optional, response time thresholds)

Example:
request = ProbeRequest(hostname="mail.example.com", service="smtp", warning=2, critical=5)
result = check_tcp(request)
"""

import logging
import time

from .errors import ConfigError, ProbeError, ValidationError
from .exchange import prepare, validate_request
from .transport import dial
from .util import matches_prefix, read_response, write_payload
from .verdict import ProbeResult, Status, build_result

logger = logging.getLogger(__name__)


def run_exchange(sock, request):
    """Send, receive and quit on an open connection; return the response text."""
    if request.send:
        logger.debug("sending %d bytes", len(request.send))
        write_payload(sock, request.send, request.timeout, phase="send")
    response = ""
    if request.expect:
        data = read_response(sock, request.read_limit, request.timeout)
        logger.debug("received %d bytes", len(data))
        response = data.decode("utf-8", errors="replace")
        if not matches_prefix(response, request.expect):
            raise ValidationError(response)
    if request.quit:
        logger.debug("sending quit (%d bytes)", len(request.quit))
        write_payload(sock, request.quit, request.timeout, phase="quit")
    return response


def check_tcp(request):
    try:
        request = validate_request(prepare(request))
    except ConfigError as exc:
        return ProbeResult(Status.UNKNOWN, 0.0, str(exc))

    start = time.monotonic()
    if request.delay > 0:
        logger.debug("waiting %.3fs before connecting", request.delay)
        time.sleep(request.delay)
    try:
        with dial(request.hostname, request.port, request.use_tls, request.timeout) as sock:
            response = run_exchange(sock, request)
    except ProbeError as exc:
        logger.warning("%s: %s", request.address, exc)
        return ProbeResult(Status.CRITICAL, time.monotonic() - start, str(exc))
    elapsed = time.monotonic() - start
    return build_result(request, elapsed, response)
