from datetime import datetime
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar, Union
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from pydantic import BaseModel

from src.core.database import utc_now

T = TypeVar("T", bound=SQLModel)


class RepositoryError(Exception):
    """Custom exception for repository errors."""

    pass


class DuplicateKeyError(RepositoryError):
    """A write violated a uniqueness constraint."""


class RecordNotFoundError(RepositoryError):
    """No record matches the requested key."""


class BaseRepository(Generic[T]):
    """CRUD over a single table addressed by a unique natural key."""

    model: Type[T]
    key: str = "id"

    def __init__(
        self,
        get_session: Callable[..., Any],
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.get_session = get_session
        self.now = now or utc_now

    def _handle_db_error(self, error: SQLAlchemyError, operation: str) -> None:
        """Handle database errors and raise appropriate exceptions."""
        if isinstance(error, IntegrityError):
            raise DuplicateKeyError(
                f"Database integrity error during {operation}: {error.orig}"
            ) from error
        else:
            raise RepositoryError(
                f"Database error during {operation}: {error}"
            ) from error

    def _key_column(self) -> Any:
        return getattr(self.model, self.key)

    async def _get_by_key(self, db: AsyncSession, value: Any) -> Optional[T]:
        result = await db.exec(select(self.model).where(self._key_column() == value))
        return result.first()

    # ----------------- READ ----------------- #
    async def get(self, value: Any) -> Optional[T]:  # type:ignore
        """Get a single item by its key, or None."""
        async with self.get_session() as db:
            try:
                return await self._get_by_key(db, value)
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get")

    async def get_all(self) -> List[T]:  # type:ignore
        """Get every item in storage order."""
        async with self.get_session() as db:
            try:
                result = await db.exec(select(self.model))
                return list(result.all())
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get_all")

    async def get_columns(self, *fields: str) -> List[Dict[str, Any]]:  # type:ignore
        """Get a projection of the given columns for every item."""
        columns = [getattr(self.model, field) for field in fields]
        async with self.get_session() as db:
            try:
                result = await db.exec(select(*columns))  # type: ignore
                return [dict(zip(fields, row)) for row in result.all()]
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get_columns")

    # ----------------- WRITE ----------------- #
    async def create(
        self, obj_in: Union[Dict[str, Any], BaseModel]
    ) -> T:  # type:ignore
        """Create a new item."""
        if isinstance(obj_in, BaseModel):
            obj_in = obj_in.model_dump()

        async with self.get_session() as db:
            try:
                obj = self.model(**obj_in)  # type: ignore
                if hasattr(obj, "created_at"):
                    obj.created_at = self.now()
                db.add(obj)
                await db.commit()
                await db.refresh(obj)
                return obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "create")

    async def replace(
        self, value: Any, obj_in: Union[Dict[str, Any], BaseModel]
    ) -> T:  # type:ignore
        """Overwrite the fields of the item at ``value``."""
        if isinstance(obj_in, BaseModel):
            update_data = obj_in.model_dump()
        else:
            update_data = dict(obj_in)

        # Remove ID from update data to prevent changing primary key
        update_data.pop("id", None)

        async with self.get_session() as db:
            try:
                db_obj = await self._get_by_key(db, value)
                if db_obj is None:
                    raise RecordNotFoundError(
                        f"{self.model.__name__} with {self.key}={value!r} not found"
                    )

                for key, field_value in update_data.items():
                    if hasattr(db_obj, key):
                        setattr(db_obj, key, field_value)
                if hasattr(db_obj, "updated_at"):
                    db_obj.updated_at = self.now()

                await db.commit()
                await db.refresh(db_obj)
                return db_obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "replace")

    async def force_delete(self, value: Any) -> None:
        """Permanently delete the item from DB."""
        async with self.get_session() as db:
            try:
                db_obj = await self._get_by_key(db, value)
                if db_obj is None:
                    raise RecordNotFoundError(
                        f"{self.model.__name__} with {self.key}={value!r} not found"
                    )

                await db.delete(db_obj)
                await db.commit()
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "force_delete")

