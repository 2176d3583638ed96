# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from checks.exchange import ProbeRequest
from checks.verdict import Status, build_result, evaluate_thresholds, format_message


@pytest.mark.parametrize(
    "elapsed, warning, critical, expected",
    [
        (5, 3, 10, Status.WARNING),
        (15, 3, 10, Status.CRITICAL),
        (1, 0, 0, Status.OK),
        (3, 3, 10, Status.OK),
        (15, 0, 10, Status.CRITICAL),
        (15, 20, 10, Status.CRITICAL),
        (100, 0, 0, Status.OK),
    ],
)
def test_evaluate_thresholds(elapsed, warning, critical, expected):
    assert evaluate_thresholds(elapsed, warning, critical) is expected


def test_exit_codes():
    assert [status.exit_code for status in Status] == [0, 1, 2, 3]


def test_format_message_trims_line_endings():
    message = format_message(0.0123, "mail.example.com", 25, "220 mail ESMTP\r\n")
    assert message == "0.012 seconds response time on mail.example.com port 25 [220 mail ESMTP]"


def test_build_result():
    request = ProbeRequest(hostname="h", port=21, warning=1)
    result = build_result(request, 1.5, "220 Ready\r\n")
    assert result.status is Status.WARNING
    assert result.elapsed == 1.5
    assert result.message == "1.500 seconds response time on h port 21 [220 Ready]"
    assert not result.ok
