"""Aggregate <-> model <-> record translation.

Each mapper owns three directions:
    to_model: aggregate -> ORM model (for inserts)
    to_values: aggregate -> column dict (for updates)
    to_domain: record -> aggregate (reads)
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel as RecordModel

from userwallet.domain.entities import UserEntity, WalletEntity
from userwallet.domain.enums import UserRole
from userwallet.domain.value_objects import Address
from userwallet.infrastructure.persistence.base import BaseModel
from userwallet.infrastructure.persistence.models import UserModel, WalletModel
from userwallet.infrastructure.persistence.records import UserRecord, WalletRecord

A = TypeVar("A")
M = TypeVar("M", bound=BaseModel)
R = TypeVar("R", bound=RecordModel)


class Mapper(Generic[A, M, R]):
    """Translation between one aggregate type and its storage shapes."""

    record_type: type[R]

    def to_model(self, entity: A) -> M:
        raise NotImplementedError

    def to_values(self, entity: A) -> dict[str, Any]:
        raise NotImplementedError

    def to_domain(self, record: R) -> A:
        raise NotImplementedError

    def to_record(self, model: M) -> R:
        """Validate a loaded row into its record schema (fails closed)."""
        return self.record_type.model_validate(model)


class UserMapper(Mapper[UserEntity, UserModel, UserRecord]):
    record_type = UserRecord

    def to_model(self, entity: UserEntity) -> UserModel:
        return UserModel(id=entity.id, **self.to_values(entity))

    def to_values(self, entity: UserEntity) -> dict[str, Any]:
        return {
            "email": entity.email,
            "country": entity.address.country,
            "postal_code": entity.address.postal_code,
            "street": entity.address.street,
            "role": UserRole(entity.role).value,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    def to_domain(self, record: UserRecord) -> UserEntity:
        return UserEntity(
            id=record.id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            email=record.email,
            address=Address(
                country=record.country,
                postal_code=record.postal_code,
                street=record.street,
            ),
            role=UserRole(record.role),
        )


class WalletMapper(Mapper[WalletEntity, WalletModel, WalletRecord]):
    record_type = WalletRecord

    def to_model(self, entity: WalletEntity) -> WalletModel:
        return WalletModel(id=entity.id, **self.to_values(entity))

    def to_values(self, entity: WalletEntity) -> dict[str, Any]:
        return {
            "balance": entity.balance,
            "user_id": entity.user_id,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    def to_domain(self, record: WalletRecord) -> WalletEntity:
        return WalletEntity(
            id=record.id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            user_id=record.user_id,
            balance=record.balance,
        )
