"""CLI for importing Nexis HTML exports."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from dotenv import load_dotenv

from common.cli_helpers import build_output_path, setup_logging
from import_nexis.config_loader import load_config
from import_nexis.exceptions import InputNotFoundError
from import_nexis.helpers import apply_overrides, parse_import_nexis_args
from import_nexis.import_nexis import import_nexis
from import_nexis.write_output import write_output

load_dotenv()

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = parse_import_nexis_args(argv)
    setup_logging(args.log_level)

    config = apply_overrides(load_config(args.config), args)

    try:
        records = import_nexis(
            args.path,
            paragraph_separator=config.paragraph_separator,
            language_date=config.language_date,
            raw_date=config.raw_date,
            max_workers=config.max_workers,
        )
    except InputNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    if not records:
        logger.warning("No articles imported")
        return 0

    output = args.output
    if output is None:
        now = datetime.now(timezone.utc)
        output = str(build_output_path("nexis", config.output_format, now, config.output_dir))

    write_output(records, output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
