"""Helper functions for the import_nexis CLI."""

from __future__ import annotations

import argparse
import logging

from common.cli_helpers import positive_int
from import_nexis.config_loader import OUTPUT_FORMATS, ImportConfig
from import_nexis.parse_dates import DATE_GRAMMARS

logger = logging.getLogger(__name__)


def parse_import_nexis_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for import_nexis.'''

    parser = argparse.ArgumentParser(
        prog="import-nexis",
        description="Extract articles and meta data from Nexis HTML exports",
    )
    parser.add_argument("path", help="A Nexis HTML file or a directory of them.")
    parser.add_argument(
        "--config",
        default=None,
        help="Config name (default/german) or path to YAML file.",
    )
    parser.add_argument("--paragraph-separator", default=None)
    parser.add_argument("--language-date", choices=sorted(DATE_GRAMMARS), default=None)
    parser.add_argument(
        "--raw-date",
        action="store_true",
        default=None,
        help="Keep the date line as written instead of parsing it.",
    )
    parser.add_argument("--output", default=None, help="Output file; format taken from the extension.")
    parser.add_argument("--output-format", choices=OUTPUT_FORMATS, default=None)
    parser.add_argument("--max-workers", type=positive_int, default=None)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def apply_overrides(config: ImportConfig, args: argparse.Namespace) -> ImportConfig:
    '''Return a config with any flags given on the command line applied.'''

    overrides = {
        "paragraph_separator": args.paragraph_separator,
        "language_date": args.language_date,
        "raw_date": args.raw_date,
        "output_format": args.output_format,
        "max_workers": args.max_workers,
    }
    values = {**vars(config)}
    for key, value in overrides.items():
        if value is not None:
            logger.debug("Overriding %s from command line: %r", key, value)
            values[key] = value
    return ImportConfig(**values)
