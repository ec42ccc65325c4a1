"""JSON adapter for saved excuse collections."""

from __future__ import annotations

import json

from excuse_engine.schema import Excuse


def _parse_item(item: dict, index: int) -> Excuse:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")
    try:
        return Excuse.from_dict(item)
    except ValueError as exc:
        raise ValueError(f"Item {index}: {exc}") from exc


def parse(file_path: str) -> list[Excuse]:
    """Parse JSON file into excuses."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]


def dump(excuses: list[Excuse], file_path: str) -> None:
    """Write excuses as a JSON list."""

    with open(file_path, "w", encoding="utf-8") as handle:
        json.dump([excuse.to_dict() for excuse in excuses], handle, ensure_ascii=False, indent=2)
