"""YAML configuration loader for Nexis imports."""

from dataclasses import dataclass, fields
from pathlib import Path

from common.config import find_config_path, load_yaml
from import_nexis.parse_dates import DATE_GRAMMARS

# Config directory relative to this file
CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "NEXIS_IMPORT_CONFIG"

OUTPUT_FORMATS = ("jsonl", "json", "parquet", "csv")


@dataclass
class ImportConfig:
    paragraph_separator: str = "|"
    language_date: str = "english"
    raw_date: bool = False
    output_format: str = "jsonl"
    output_dir: str = "output"
    max_workers: int = 1

    def __post_init__(self) -> None:
        if self.language_date not in DATE_GRAMMARS:
            raise ValueError(
                f"Invalid language_date: {self.language_date}. "
                f"Must be one of {sorted(DATE_GRAMMARS)}"
            )

        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output_format: {self.output_format}. Must be one of {list(OUTPUT_FORMATS)}"
            )

        if not self.paragraph_separator:
            raise ValueError("paragraph_separator must not be empty")

        if not isinstance(self.raw_date, bool):
            raise ValueError(f"raw_date must be true or false, got {self.raw_date!r}")

        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")


def config_from_dict(data: dict) -> ImportConfig:
    """Build a config, rejecting keys ImportConfig does not know."""
    known = {f.name for f in fields(ImportConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return ImportConfig(**data)


def load_config(config_name: str | None = None) -> ImportConfig:
    """Load a named config (e.g. "default", "german") or a YAML file path.

    With no name, the NEXIS_IMPORT_CONFIG environment variable is consulted
    before falling back to "default".
    """
    config_path = find_config_path(
        config_name,
        CONFIG_DIR,
        default_name="default",
        env_var=CONFIG_ENV_VAR,
    )
    return config_from_dict(load_yaml(config_path))
