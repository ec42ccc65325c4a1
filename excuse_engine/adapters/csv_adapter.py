"""CSV adapter for saved excuse collections."""

from __future__ import annotations

import csv

from excuse_engine.schema import Excuse

FIELDNAMES = [
    "id",
    "title",
    "content",
    "category",
    "believability_score",
    "situation",
    "urgency",
    "audience",
    "timeframe",
    "relationship",
    "timestamp",
    "language",
]
_REQUIRED_FIELDS = {"id", "content", "category", "believability_score", "situation", "timestamp"}
_CONTEXT_FIELDS = ("situation", "urgency", "audience", "timeframe", "relationship")


def _parse_row(row: dict, row_number: int) -> Excuse:
    missing = sorted(field for field in _REQUIRED_FIELDS if not row.get(field))
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    record = {key: value for key, value in row.items() if key not in _CONTEXT_FIELDS}
    record["context"] = {key: row[key].strip() for key in _CONTEXT_FIELDS if row.get(key)}
    try:
        return Excuse.from_dict(record)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: {exc}") from exc


def parse(file_path: str) -> list[Excuse]:
    """Parse CSV file into a list of excuses."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        excuses: list[Excuse] = []
        for row_number, row in enumerate(reader, start=2):
            excuses.append(_parse_row(row, row_number))
        return excuses


def dump(excuses: list[Excuse], file_path: str) -> None:
    """Write one row per excuse with the context flattened into columns."""

    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=FIELDNAMES)
        writer.writeheader()
        for excuse in excuses:
            writer.writerow(
                {
                    "id": excuse.id,
                    "title": excuse.title,
                    "content": excuse.content,
                    "category": excuse.category,
                    "believability_score": excuse.believability_score,
                    "situation": excuse.context.situation,
                    "urgency": excuse.context.urgency,
                    "audience": excuse.context.audience,
                    "timeframe": excuse.context.timeframe,
                    "relationship": excuse.context.relationship,
                    "timestamp": excuse.timestamp.isoformat(),
                    "language": excuse.language,
                }
            )
