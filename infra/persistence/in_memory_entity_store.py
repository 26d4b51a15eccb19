from __future__ import annotations

from domain.errors import DuplicateKeyError, NotFoundError
from domain.models import Identifier, Record, Scalar
from domain.ports import IdGeneratorPort
from infra.runtime import SequentialIdGenerator
from ._criteria import filter_records


class InMemoryEntityStore:
    """
    Dict-backed implementation of ``EntityStorePort``.

    Records live for as long as the instance does. Dict ordering gives
    insertion order for ``find_all``; replacing a value keeps its slot.
    """

    def __init__(
        self,
        *,
        id_generator: IdGeneratorPort | None = None,
        allow_overwrite: bool = False,
    ) -> None:
        self._records: dict[Identifier, Record] = {}
        self._ids = id_generator or SequentialIdGenerator()
        self._allow_overwrite = allow_overwrite

    def create(self, record: Record) -> Identifier:
        if record.id is None:
            record = record.with_id(self._assign_id())
        elif record.id in self._records and not self._allow_overwrite:
            raise DuplicateKeyError(record.id)
        self._records[record.id] = record
        return record.id

    def read(self, identifier: Identifier) -> Record:
        try:
            return self._records[identifier]
        except KeyError:
            raise NotFoundError(identifier) from None

    def update(self, record: Record) -> None:
        if record.id is None or record.id not in self._records:
            raise NotFoundError(record.id)
        self._records[record.id] = record

    def delete(self, identifier: Identifier) -> None:
        try:
            del self._records[identifier]
        except KeyError:
            raise NotFoundError(identifier) from None

    def find_all(self) -> list[Record]:
        return list(self._records.values())

    def find_by_id(self, identifier: Identifier) -> Record | None:
        return self._records.get(identifier)

    def find_by(self, **criteria: Scalar) -> list[Record]:
        return filter_records(self._records.values(), criteria)

    def save(self, record: Record) -> Identifier:
        if record.id is not None and record.id in self._records:
            self.update(record)
            return record.id
        return self.create(record)

    def exists(self, identifier: Identifier) -> bool:
        return identifier in self._records

    def count(self) -> int:
        return len(self._records)

    def _assign_id(self) -> Identifier:
        identifier = self._ids.next_id()
        while identifier in self._records:
            identifier = self._ids.next_id()
        return identifier
