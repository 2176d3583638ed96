# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Logging setup for the CLI.

Diagnostics go to stderr so the single status line on stdout is all the
monitoring host parses. CHECK_TCP_LOG_LEVEL sets the level when --log-level
is not given.
"""

import logging
import os
import sys

LOG_LEVEL_ENV = "CHECK_TCP_LOG_LEVEL"
LOG_FORMAT = "check-tcp %(levelname)s %(name)s: %(message)s"


def setup_logging(level=None, stream=None):
    name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )
