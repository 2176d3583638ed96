# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

import argparse
import logging
import sys

import yaml

from checks.errors import ConfigError
from checks.exchange import DEFAULT_TIMEOUT, ProbeRequest
from checks.log import setup_logging
from checks.tcp import check_tcp
from checks.verdict import ProbeResult, Status

logger = logging.getLogger("check_tcp")

# config file key -> expected type; keys match the long option names
CONFIG_KEYS = {
    "hostname": str,
    "port": int,
    "send": str,
    "expect": str,
    "quit": str,
    "ssl": bool,
    "escape": bool,
    "timeout": float,
    "maxbytes": int,
    "delay": float,
    "warning": float,
    "critical": float,
    "service": str,
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="check-tcp",
        description="Connect to a TCP service, optionally exchange strings, and report response time",
    )
    parser.add_argument("-H", "--hostname", help="host name or IP address")
    parser.add_argument("-p", "--port", type=int, help="port number")
    parser.add_argument("-s", "--send", help="string to send to the server")
    parser.add_argument("-e", "--expect", help="string the server response must start with")
    parser.add_argument(
        "-q",
        "--quit",
        help="string to send to initiate a clean close of the connection",
    )
    parser.add_argument(
        "-S",
        "--ssl",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="use TLS for the connection (default: service default)",
    )
    parser.add_argument(
        "-E",
        "--escape",
        action="store_true",
        default=None,
        help=(
            "decode \\n, \\r, \\t or \\\\ in send or quit string; "
            "without it nothing is added to send and \\r\\n is added to quit"
        ),
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        help=f"seconds before connection and I/O time out (default: {DEFAULT_TIMEOUT:g}, 0 = never)",
    )
    parser.add_argument("-m", "--maxbytes", type=int, help="maximum response size to read (default: 32768)")
    parser.add_argument("-d", "--delay", type=float, help="seconds to wait before connecting")
    parser.add_argument("-w", "--warning", type=float, help="response time to result in warning status (seconds)")
    parser.add_argument("-c", "--critical", type=float, help="response time to result in critical status (seconds)")
    parser.add_argument("--service", help="FTP, POP, SPOP, IMAP, SIMAP, SMTP or SSMTP defaults")
    parser.add_argument("--config", help="path to config YAML with the same keys as the long options")
    parser.add_argument("--log-level", help="log level for diagnostics on stderr (default: WARNING)")
    return parser


def load_config(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"failed to read config: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid yaml: {exc}") from exc
    if not isinstance(config, dict):
        raise ConfigError("config error: top level must be a mapping")
    unknown = sorted(str(key) for key in config if key not in CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"config error: unknown keys: {', '.join(unknown)}")
    return {key: _coerce(key, value) for key, value in config.items() if value is not None}


def _coerce(key, value):
    kind = CONFIG_KEYS[key]
    if kind is bool:
        if not isinstance(value, bool):
            raise ConfigError(f"config error: {key} must be true or false")
        return value
    if kind is str:
        return str(value)
    if isinstance(value, bool):
        raise ConfigError(f"config error: {key} must be a number")
    try:
        return kind(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"config error: {key}: {exc}") from exc


def apply_config(args, config):
    """Fill options not given on the command line from the config file."""
    for key, value in config.items():
        if getattr(args, key) is None:
            setattr(args, key, value)
    return args


def _or_default(value, default):
    return default if value is None else value


def request_from_args(args):
    return ProbeRequest(
        hostname=args.hostname or "",
        timeout=_or_default(args.timeout, DEFAULT_TIMEOUT),
        max_bytes=_or_default(args.maxbytes, 0),
        delay=_or_default(args.delay, 0.0),
        warning=_or_default(args.warning, 0.0),
        critical=_or_default(args.critical, 0.0),
        escape=bool(args.escape),
        service=args.service or "",
        port=args.port,
        send=args.send,
        expect=args.expect,
        quit=args.quit,
        use_tls=args.ssl,
    )


def check_name(args):
    return (args.service or "TCP").upper()


def report(name, result):
    print(f"{name} {result.status.name}: {result.message}")
    return result.status.exit_code


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.config:
            apply_config(args, load_config(args.config))
        request = request_from_args(args)
    except ConfigError as exc:
        logger.error("%s", exc)
        return report(check_name(args), ProbeResult(Status.UNKNOWN, 0.0, str(exc)))

    return report(check_name(args), check_tcp(request))


if __name__ == "__main__":
    sys.exit(main())
