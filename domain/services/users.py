from __future__ import annotations

from typing import Sequence

from domain.models import Identifier, Record, UserDTO
from domain.ports import EntityStorePort, LoggerPort


class UserMapper:
    """Translates between ``UserDTO`` and the stored ``Record`` shape."""

    @staticmethod
    def to_record(dto: UserDTO) -> Record:
        return Record(
            id=dto.id,
            fields={
                "first_name": dto.first_name,
                "last_name": dto.last_name,
                "email": dto.email,
            },
        )

    @staticmethod
    def to_dto(record: Record) -> UserDTO:
        return UserDTO(
            id=record.id,
            first_name=str(record.get("first_name", "")),
            last_name=str(record.get("last_name", "")),
            email=str(record.get("email", "")),
        )


class UserService:
    """
    User registration and lookup on top of an ``EntityStorePort``.

    The store decides identifiers; callers register a ``UserDTO`` without
    an id and get back a copy carrying the assigned one.
    """

    def __init__(
        self,
        store: EntityStorePort,
        logger: LoggerPort,
        mapper: UserMapper | None = None,
    ) -> None:
        self._store = store
        self._logger = logger
        self._mapper = mapper or UserMapper()

    def register_user(self, dto: UserDTO) -> UserDTO:
        user_id = self._store.create(self._mapper.to_record(dto))
        self._logger.info("user registered", user_id=user_id)
        return self._mapper.to_dto(self._store.read(user_id))

    def get_user_by_id(self, user_id: Identifier) -> UserDTO | None:
        record = self._store.find_by_id(user_id)
        if record is None:
            return None
        return self._mapper.to_dto(record)

    def get_all_users(self) -> Sequence[UserDTO]:
        return [self._mapper.to_dto(r) for r in self._store.find_all()]

    def find_by_last_name(self, last_name: str) -> Sequence[UserDTO]:
        return [self._mapper.to_dto(r) for r in self._store.find_by(last_name=last_name)]

    def find_by_email(self, email: str) -> UserDTO | None:
        matches = self._store.find_by(email=email)
        if not matches:
            return None
        if len(matches) > 1:
            self._logger.warning("email shared by several users", email=email, count=len(matches))
        return self._mapper.to_dto(matches[0])

    def update_user(self, dto: UserDTO) -> None:
        self._store.update(self._mapper.to_record(dto))
        self._logger.info("user updated", user_id=dto.id)

    def remove_user(self, user_id: Identifier) -> None:
        self._store.delete(user_id)
        self._logger.info("user removed", user_id=user_id)
