"""Data models for the Nexis import pipeline."""

from dataclasses import dataclass, field

from lxml.html import HtmlElement

FIELD_NAMES = ("pub", "edition", "date", "byline", "length", "section", "head", "body")
RECORD_COLUMNS = FIELD_NAMES + ("file",)


@dataclass
class ContentBlock:
    """One div of an article with its flattened text."""
    node: HtmlElement
    text: str

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass
class ArticleFields:
    """Fields classified from one article, filled in block by block."""
    pub: str = ""
    edition: str = ""
    date: str = ""
    byline: str = ""
    length: str = ""
    section: str = ""
    head: str = ""
    body: str = ""


@dataclass
class NexisRecord:
    """One extracted article. `length` is digit-only text."""
    pub: str
    edition: str
    date: str
    byline: str
    length: str
    section: str
    head: str
    body: str
    file: str


@dataclass
class FieldDiagnostic:
    """A required field that came out empty."""
    field: str
    message: str


@dataclass
class ExtractionResult:
    """Record plus the field-level misses found while assembling it."""
    record: NexisRecord
    diagnostics: list[FieldDiagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics
