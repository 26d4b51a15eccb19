from __future__ import annotations

import json
import sqlite3

from domain.errors import DuplicateKeyError, NotFoundError
from domain.models import Identifier, Record, Scalar
from domain.ports import IdGeneratorPort
from infra.runtime import SequentialIdGenerator
from ._criteria import filter_records

_DEFAULT_COLLECTION = "default"


class SQLiteEntityStore:
    """
    SQLite-backed implementation of ``EntityStorePort``.

    Several stores can share one database file; each is scoped by
    ``collection``. Identifiers are stored as text next to their type so
    that ``1`` and ``"1"`` stay distinct and come back as they went in.
    Field values are serialized as a JSON object.
    """

    _SCHEMA_SQL = """\
    CREATE TABLE IF NOT EXISTS records (
        seq        INTEGER PRIMARY KEY AUTOINCREMENT,
        collection TEXT NOT NULL,
        id_type    TEXT NOT NULL,
        id         TEXT NOT NULL,
        fields     TEXT NOT NULL DEFAULT '{}',
        UNIQUE (collection, id_type, id)
    );
    """

    def __init__(
        self,
        db_path: str = ":memory:",
        collection: str = _DEFAULT_COLLECTION,
        *,
        id_generator: IdGeneratorPort | None = None,
        allow_overwrite: bool = False,
    ) -> None:
        self._conn = sqlite3.connect(db_path)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.execute("PRAGMA foreign_keys=ON")
        self._conn.executescript(self._SCHEMA_SQL)
        self._collection = collection
        self._ids = id_generator or SequentialIdGenerator()
        self._allow_overwrite = allow_overwrite

    def __enter__(self) -> "SQLiteEntityStore":
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    @property
    def collection(self) -> str:
        return self._collection

    def create(self, record: Record) -> Identifier:
        if record.id is None:
            record = record.with_id(self._assign_id())
        elif self.exists(record.id):
            if not self._allow_overwrite:
                raise DuplicateKeyError(record.id, self._collection)
            self._write_fields(record)
            return record.id
        self._conn.execute(
            "INSERT INTO records (collection, id_type, id, fields) VALUES (?, ?, ?, ?)",
            (self._collection, *_key(record.id), _dump_fields(record)),
        )
        self._conn.commit()
        return record.id

    def read(self, identifier: Identifier) -> Record:
        record = self.find_by_id(identifier)
        if record is None:
            raise NotFoundError(identifier, self._collection)
        return record

    def update(self, record: Record) -> None:
        if record.id is None or not self._write_fields(record):
            raise NotFoundError(record.id, self._collection)

    def delete(self, identifier: Identifier) -> None:
        cur = self._conn.execute(
            "DELETE FROM records WHERE collection = ? AND id_type = ? AND id = ?",
            (self._collection, *_key(identifier)),
        )
        self._conn.commit()
        if cur.rowcount == 0:
            raise NotFoundError(identifier, self._collection)

    def find_all(self) -> list[Record]:
        rows = self._conn.execute(
            "SELECT id_type, id, fields FROM records "
            "WHERE collection = ? ORDER BY seq",
            (self._collection,),
        ).fetchall()
        return [self._row_to_record(r) for r in rows]

    def find_by_id(self, identifier: Identifier) -> Record | None:
        row = self._conn.execute(
            "SELECT id_type, id, fields FROM records "
            "WHERE collection = ? AND id_type = ? AND id = ?",
            (self._collection, *_key(identifier)),
        ).fetchone()
        if row is None:
            return None
        return self._row_to_record(row)

    def find_by(self, **criteria: Scalar) -> list[Record]:
        return filter_records(self.find_all(), criteria)

    def save(self, record: Record) -> Identifier:
        if record.id is not None and self._write_fields(record):
            return record.id
        return self.create(record)

    def exists(self, identifier: Identifier) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM records WHERE collection = ? AND id_type = ? AND id = ?",
            (self._collection, *_key(identifier)),
        ).fetchone()
        return row is not None

    def count(self) -> int:
        row = self._conn.execute(
            "SELECT COUNT(*) FROM records WHERE collection = ?",
            (self._collection,),
        ).fetchone()
        return int(row[0])

    def close(self) -> None:
        self._conn.close()

    # -- helpers ------------------------------------------------------------

    def _write_fields(self, record: Record) -> bool:
        cur = self._conn.execute(
            "UPDATE records SET fields = ? "
            "WHERE collection = ? AND id_type = ? AND id = ?",
            (_dump_fields(record), self._collection, *_key(record.id)),
        )
        self._conn.commit()
        return cur.rowcount > 0

    def _assign_id(self) -> Identifier:
        identifier = self._ids.next_id()
        while self.exists(identifier):
            identifier = self._ids.next_id()
        return identifier

    @staticmethod
    def _row_to_record(row: tuple[object, ...]) -> Record:
        id_type, raw_id, raw_fields = str(row[0]), str(row[1]), str(row[2])
        identifier: Identifier = int(raw_id) if id_type == "int" else raw_id
        return Record(id=identifier, fields=json.loads(raw_fields))


def _key(identifier: Identifier | None) -> tuple[str, str]:
    if isinstance(identifier, int):
        return "int", str(identifier)
    return "str", str(identifier)


def _dump_fields(record: Record) -> str:
    return json.dumps(dict(record.fields))
