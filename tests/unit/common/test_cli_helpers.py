"""Tests for common.cli_helpers module."""

import argparse
from datetime import datetime

import pytest

from common.cli_helpers import build_output_path, positive_int


class TestPositiveInt:
    def test_valid(self) -> None:
        assert positive_int("4") == 4

    def test_zero_rejected(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int("0")

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int("many")


class TestBuildOutputPath:
    def test_timestamped_name_and_directory(self, tmp_path) -> None:
        output_dir = tmp_path / "output"
        path = build_output_path("nexis", "parquet", datetime(2024, 1, 2, 3, 4), str(output_dir))
        assert path == output_dir / "nexis_2024_01_02_03_04.parquet"
        assert output_dir.is_dir()
