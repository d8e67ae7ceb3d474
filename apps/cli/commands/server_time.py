from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from typing import Mapping, Sequence

from apps.cli.wiring.modules.server_clock import ServerClockWiring
from server_time.contexts.server_clock.application import Clock, is_valid_local_time
from server_time.contexts.server_clock.domain import (
    compute_dst_window,
    parse_server_timestamp,
    resolve_offset,
)
from server_time.platform.config import ServerTimeConfig
from server_time.platform.errors import ServerTimeError

log = logging.getLogger(__name__)

_EXIT_OK = 0
_EXIT_INVALID_INPUT = 2


@dataclass(frozen=True, slots=True)
class ServerTimeReport:
    server_time: str
    offset_hours: int
    user_local: str


@dataclass(frozen=True, slots=True)
class DstWindowReport:
    year: int
    start: str
    end: str


class ServerTimeCli:
    def __init__(self, *, environ: Mapping[str, str], clock: Clock | None = None) -> None:
        self._wiring = ServerClockWiring(environ=environ)
        self._clock = clock

    def run(self, argv: Sequence[str]) -> int:
        parser = _build_parser()
        ns = parser.parse_args(list(argv))

        try:
            config = self._wiring.config()
        except (FileNotFoundError, ValueError) as error:
            return _report_error(
                ServerTimeError(code="invalid_config", message=str(error))
            )
        logging.getLogger().setLevel(config.log_level)

        try:
            if ns.command == "now":
                return self._now(ns, config=config)
            if ns.command == "convert":
                return self._convert(ns, config=config)
            if ns.command == "to-server":
                return self._to_server(ns)
            return self._window(ns)
        except ServerTimeError as error:
            return _report_error(error)
        except OverflowError as error:
            return _report_error(
                ServerTimeError(code="out_of_range", message=str(error))
            )

    def _now(self, ns: argparse.Namespace, *, config: ServerTimeConfig) -> int:
        get_server_time = self._wiring.get_server_time(clock=self._clock)
        server_time = get_server_time.get_server_time_iso()
        user_local = self._wiring.convert_to_user_local(config=config).convert(server_time)

        # Offset of the rendered reading, not a second clock read.
        report = ServerTimeReport(
            server_time=server_time,
            offset_hours=resolve_offset(parse_server_timestamp(server_time)).hours,
            user_local=user_local,
        )
        if ns.report_format == "json":
            print(json.dumps(asdict(report), ensure_ascii=False))
        else:
            print(
                "server-time now:\n"
                f"- server: {report.server_time}\n"
                f"- offset: UTC+{report.offset_hours}\n"
                f"- local: {report.user_local}\n"
            )
        return _EXIT_OK

    def _convert(self, ns: argparse.Namespace, *, config: ServerTimeConfig) -> int:
        use_case = self._wiring.convert_to_user_local(config=config)
        if ns.strict:
            print(use_case.convert_strict(ns.timestamp))
            return _EXIT_OK

        user_local = use_case.convert(ns.timestamp)
        print(user_local)
        return _EXIT_OK if is_valid_local_time(user_local) else _EXIT_INVALID_INPUT

    def _to_server(self, ns: argparse.Namespace) -> int:
        print(self._wiring.get_server_time().convert_utc_iso_to_server_iso(ns.timestamp))
        return _EXIT_OK

    def _window(self, ns: argparse.Namespace) -> int:
        try:
            window = compute_dst_window(ns.year)
        except ValueError as error:
            log.error("invalid year %s: %s", ns.year, error)
            return _EXIT_INVALID_INPUT

        report = DstWindowReport(year=window.year, start=str(window.start), end=str(window.end))
        if ns.report_format == "json":
            print(json.dumps(asdict(report), ensure_ascii=False))
        else:
            print(f"{report.year}: [{report.start}, {report.end})")
        return _EXIT_OK


def _report_error(error: ServerTimeError) -> int:
    print(json.dumps(error.to_payload(), ensure_ascii=False), file=sys.stderr)
    return _EXIT_INVALID_INPUT


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="server-time")
    sub = p.add_subparsers(dest="command", required=True)

    now = sub.add_parser("now", help="Current server time, offset and local rendering")
    _add_report_format(now)

    convert = sub.add_parser("convert", help="Render server timestamp in local time")
    convert.add_argument("timestamp", help="Offset-qualified ISO-8601 timestamp")
    convert.add_argument(
        "--strict",
        action="store_true",
        help="Fail with an error payload instead of printing 'Invalid Date'",
    )

    to_server = sub.add_parser("to-server", help="Render any instant as server timestamp")
    to_server.add_argument("timestamp", help="Offset-qualified ISO-8601 timestamp, e.g. ...Z")

    window = sub.add_parser("window", help="DST window of a calendar year")
    window.add_argument("year", type=int)
    _add_report_format(window)
    return p


def _add_report_format(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--report-format",
        choices=("text", "json"),
        default="text",
        help="Output format",
    )
