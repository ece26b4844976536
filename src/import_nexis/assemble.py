"""Turn classified fields into records and flag missing required fields."""

from dataclasses import asdict

from import_nexis.models import ArticleFields, ExtractionResult, FieldDiagnostic, NexisRecord

REQUIRED_FIELDS = {
    "pub": "publication name",
    "date": "date",
    "head": "heading",
    "body": "body text",
}


def find_missing_fields(record: NexisRecord) -> list[FieldDiagnostic]:
    diagnostics = []
    for name, label in REQUIRED_FIELDS.items():
        if not getattr(record, name):
            diagnostics.append(FieldDiagnostic(field=name, message=f"Failed to extract {label}"))
    return diagnostics


def assemble_record(fields: ArticleFields, file_name: str) -> ExtractionResult:
    """Build the record for one article.

    Missing required fields do not stop assembly; they are returned as
    diagnostics next to the record.
    """
    record = NexisRecord(**asdict(fields), file=file_name)
    return ExtractionResult(record=record, diagnostics=find_missing_fields(record))
