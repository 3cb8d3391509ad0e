from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

from sqlmodel import SQLModel

from src.core import exceptions
from src.core.bases.base_repository import (
    BaseRepository,
    DuplicateKeyError,
    RecordNotFoundError,
    RepositoryError,
)
from src.core.response.schemas import ErrorDetail

T = TypeVar("T", bound=SQLModel)


class BaseService(Generic[T]):
    """Base service translating repository failures into service exceptions."""

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    @property
    def model_name(self) -> str:
        return self.repository.model.__name__

    @contextmanager
    def _repository_errors(self, operation: str) -> Iterator[None]:
        """Map repository errors raised inside the block onto the HTTP taxonomy."""
        try:
            yield
        except RecordNotFoundError as e:
            raise exceptions.NotFoundException(f"{self.model_name} not found") from e
        except DuplicateKeyError as e:
            key = self.repository.key
            raise exceptions.ConflictException(
                f"{self.model_name} with this {key} already exists",
                error_details=[
                    ErrorDetail(
                        field=key,
                        code="DUPLICATE",
                        message=f"{key.capitalize()} is already taken!",
                    )
                ],
            ) from e
        except RepositoryError as e:
            raise exceptions.ServiceException(
                f"Error during {operation}: {e}"
            ) from e
