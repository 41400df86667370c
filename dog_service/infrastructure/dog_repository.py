"""SQL Dog Repository — SQLAlchemy implementation of the DogRepository protocol.

Invariants:
    - Every SQLAlchemyError (and driver OverflowError) is rolled back and
      returned as a GatewayFailure
    - Keys that are not 64-bit integers (1.5, inf, 2**70) are a GatewayFailure
    - update/delete on a missing id return a GatewayFailure (no separate not-found)
    - Returned Dog values are detached snapshots, never live ORM rows
    - Whole-valued ages come back as int (3, not 3.0)

Design Decisions:
    - One repository per request, bound to the request's AsyncSession
    - Commit inside each mutating call: operations are single-row and atomic
      at the database level, no unit-of-work spans several calls
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dog_service.core.domain_types import Dog, DogId, DogOperation, GatewayFailure
from dog_service.models.dog import Dog as DogModel

# drivers raise OverflowError, not a DBAPI error, for integers past 64 bits
_STORE_ERRORS = (SQLAlchemyError, OverflowError)
_MIN_KEY, _MAX_KEY = -(2 ** 63), 2 ** 63 - 1


class SqlDogRepository:
    """DogRepository backed by a relational database."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, fields: dict) -> Dog | GatewayFailure:
        try:
            row = DogModel(**fields)
            self.db.add(row)
            await self.db.commit()
            await self.db.refresh(row)
            return _to_dog(row)
        except _STORE_ERRORS as e:
            return await self._fail(DogOperation.CREATE, e)

    async def find_one(self, dog_id: DogId | float) -> Dog | None | GatewayFailure:
        if failure := _check_key(DogOperation.GET, dog_id):
            return failure
        try:
            row = await self._get_row(dog_id)
            return _to_dog(row) if row else None
        except _STORE_ERRORS as e:
            return await self._fail(DogOperation.GET, e)

    async def find_many(self) -> list[Dog] | GatewayFailure:
        try:
            result = await self.db.execute(select(DogModel))
            return [_to_dog(row) for row in result.scalars().all()]
        except _STORE_ERRORS as e:
            return await self._fail(DogOperation.LIST, e)

    async def update(self, dog_id: DogId | float, fields: dict) -> Dog | GatewayFailure:
        if failure := _check_key(DogOperation.UPDATE, dog_id):
            return failure
        try:
            row = await self._get_row(dog_id)
            if not row:
                return GatewayFailure(
                    DogOperation.UPDATE, f"Record to update not found (id={dog_id})",
                )
            for name, value in fields.items():
                setattr(row, name, value)
            await self.db.commit()
            await self.db.refresh(row)
            return _to_dog(row)
        except _STORE_ERRORS as e:
            return await self._fail(DogOperation.UPDATE, e)

    async def delete(self, dog_id: DogId | float) -> None | GatewayFailure:
        if failure := _check_key(DogOperation.DELETE, dog_id):
            return failure
        try:
            row = await self._get_row(dog_id)
            if not row:
                return GatewayFailure(
                    DogOperation.DELETE, f"Record to delete does not exist (id={dog_id})",
                )
            await self.db.delete(row)
            await self.db.commit()
            return None
        except _STORE_ERRORS as e:
            return await self._fail(DogOperation.DELETE, e)

    async def _get_row(self, dog_id: DogId | float) -> DogModel | None:
        result = await self.db.execute(
            select(DogModel).where(DogModel.id == dog_id),
        )
        return result.scalar_one_or_none()

    async def _fail(
        self, operation: DogOperation, exc: Exception,
    ) -> GatewayFailure:
        await self.db.rollback()
        return GatewayFailure(operation, f"{type(exc).__name__}: {exc}")


def _check_key(operation: DogOperation, dog_id: object) -> GatewayFailure | None:
    """Refuse keys that cannot address an integer primary key."""
    if isinstance(dog_id, int) and _MIN_KEY <= dog_id <= _MAX_KEY:
        return None
    return GatewayFailure(operation, f"Invalid value for dogs.id: {dog_id!r}")

def _to_dog(row: DogModel) -> Dog:
    age = row.age
    if isinstance(age, float) and age.is_integer():
        age = int(age)
    return Dog(
        id=DogId(row.id),
        name=row.name,
        breed=row.breed,
        description=row.description,
        age=age,
    )
