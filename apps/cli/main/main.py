from __future__ import annotations

import locale
import logging
import os
import sys

from apps.cli.commands.server_time import ServerTimeCli


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _configure_locale() -> None:
    # %c follows LC_TIME.
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        logging.getLogger(__name__).warning("cannot apply user locale, using C locale for LC_TIME")


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    _configure_locale()
    args = argv if argv is not None else sys.argv[1:]
    return ServerTimeCli(environ=os.environ).run(args)


if __name__ == "__main__":
    raise SystemExit(main())
