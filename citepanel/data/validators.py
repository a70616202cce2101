from __future__ import annotations

from typing import Iterable, List, Mapping


def validate_required_fields(record: Mapping, fields: Iterable[str]) -> List[str]:
    missing = [field for field in fields if not record.get(field)]
    return missing


def validate_present_fields(record: Mapping, fields: Iterable[str]) -> List[str]:
    """Like ``validate_required_fields`` but accepts empty values."""
    return [field for field in fields if record.get(field) is None]


def assert_required_fields(
    record: Mapping,
    fields: Iterable[str],
    allow_empty: Iterable[str] = (),
) -> None:
    fields = list(fields)
    allow_empty = set(allow_empty)
    missing = validate_required_fields(
        record, [field for field in fields if field not in allow_empty]
    )
    missing += validate_present_fields(
        record, [field for field in fields if field in allow_empty]
    )
    if missing:
        raise ValueError(f"Missing required fields: {', '.join(missing)}")
