from __future__ import annotations

from typing import Iterable, Mapping

from domain.models import Record, Scalar

_MISSING = object()


def matches(record: Record, criteria: Mapping[str, Scalar]) -> bool:
    for name, expected in criteria.items():
        actual = record.id if name == "id" else record.fields.get(name, _MISSING)
        if actual is _MISSING or actual != expected:
            return False
    return True


def filter_records(records: Iterable[Record], criteria: Mapping[str, Scalar]) -> list[Record]:
    return [r for r in records if matches(r, criteria)]
