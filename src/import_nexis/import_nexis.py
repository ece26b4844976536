"""Import Nexis HTML export files into records."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable

from import_nexis.assemble import assemble_record
from import_nexis.classify_fields import classify_article
from import_nexis.exceptions import InputNotFoundError, UnparseableMarkupError
from import_nexis.models import ExtractionResult, NexisRecord
from import_nexis.normalize_markup import normalize_markup
from import_nexis.parse_dates import get_grammar
from import_nexis.split_documents import split_documents

logger = logging.getLogger(__name__)

HTML_SUFFIXES = (".html", ".htm", ".xhtml")


def extract_records(
    lines: Iterable[str],
    file_name: str,
    paragraph_separator: str = "|",
    language_date: str = "english",
    raw_date: bool = False,
) -> list[ExtractionResult]:
    """Extract one result per article from the lines of an export file."""
    grammar = get_grammar(language_date)
    articles = split_documents(normalize_markup(lines))
    results = []
    for article in articles:
        fields = classify_article(
            article,
            paragraph_separator=paragraph_separator,
            grammar=grammar,
            raw_date=raw_date,
        )
        results.append(assemble_record(fields, file_name))
    return results


def read_lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8-sig").splitlines()


def import_nexis_html(
    path: str | Path,
    paragraph_separator: str = "|",
    language_date: str = "english",
    raw_date: bool = False,
) -> list[NexisRecord]:
    """Import every article of a single export file.

    Field-level misses are logged as warnings; read and parse errors are
    raised.
    """
    path = Path(path)
    logger.info("Reading %s", path)

    results = extract_records(
        read_lines(path),
        path.name,
        paragraph_separator=paragraph_separator,
        language_date=language_date,
        raw_date=raw_date,
    )

    for index, result in enumerate(results):
        if result.ok:
            continue
        for diagnostic in result.diagnostics:
            logger.warning("%s (article %d of %s)", diagnostic.message, index + 1, path.name)

    if not results:
        logger.warning("No articles found in %s", path)
    else:
        logger.info("Extracted %d articles from %s", len(results), path.name)
    return [result.record for result in results]


def discover_html_files(directory: Path) -> list[Path]:
    """Find export files below a directory, sorted by path."""
    return sorted(
        path for path in directory.rglob("*")
        if path.is_file() and path.suffix.lower() in HTML_SUFFIXES
    )


def _import_file_in_batch(
    path: Path,
    paragraph_separator: str,
    language_date: str,
    raw_date: bool,
) -> list[NexisRecord]:
    try:
        return import_nexis_html(path, paragraph_separator, language_date, raw_date)
    except (OSError, UnicodeDecodeError, UnparseableMarkupError) as exc:
        logger.error("Skipping %s: %s", path, exc)
        return []


def import_nexis(
    path: str | Path,
    paragraph_separator: str = "|",
    language_date: str = "english",
    raw_date: bool = False,
    max_workers: int = 1,
) -> list[NexisRecord]:
    """Import a single export file or every export file below a directory.

    In directory mode a file that cannot be read or parsed is logged and
    skipped. Records come back in file order, then article order.

    Raises:
        InputNotFoundError: If path is neither a file nor a directory.
        ValueError: If language_date is not a known date grammar.
    """
    get_grammar(language_date)
    path = Path(path)

    if path.is_dir():
        files = discover_html_files(path)
        logger.info("Found %d HTML files in %s", len(files), path)

        def run(file_path: Path) -> list[NexisRecord]:
            return _import_file_in_batch(file_path, paragraph_separator, language_date, raw_date)

        if max_workers > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                per_file = list(executor.map(run, files))
        else:
            per_file = [run(file_path) for file_path in files]

        records = [record for file_records in per_file for record in file_records]
        logger.info("Imported %d articles from %d files", len(records), len(files))
        return records

    if path.is_file():
        return import_nexis_html(path, paragraph_separator, language_date, raw_date)

    raise InputNotFoundError(path)
