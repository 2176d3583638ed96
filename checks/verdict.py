# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Verdict from elapsed time and the validated response.

Example:
evaluate_thresholds(5.0, warning=3.0, critical=10.0)  # Status.WARNING
"""

from dataclasses import dataclass
from enum import Enum


class Status(Enum):
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def exit_code(self):
        return self.value


@dataclass(frozen=True)
class ProbeResult:
    status: Status
    elapsed: float
    message: str

    @property
    def ok(self):
        return self.status is Status.OK


def evaluate_thresholds(elapsed, warning, critical):
    status = Status.OK
    if warning > 0 and elapsed > warning:
        status = Status.WARNING
    # evaluated second so it wins when both fire
    if critical > 0 and elapsed > critical:
        status = Status.CRITICAL
    return status


def format_message(elapsed, hostname, port, response):
    trimmed = response.strip("\r\n")
    return f"{elapsed:.3f} seconds response time on {hostname} port {port} [{trimmed}]"


def build_result(request, elapsed, response):
    status = evaluate_thresholds(elapsed, request.warning, request.critical)
    message = format_message(elapsed, request.hostname, request.port, response)
    return ProbeResult(status, elapsed, message)
