from pydantic import BaseModel, Field
from typing import Any, Generic, List, TypeVar, Optional

T = TypeVar("T")


class BaseResponse(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = Field(default=None)
    data: Optional[T] = None


class ListResponse(BaseResponse, Generic[T]):
    total: int = Field(default=0)
    data: List[T] = []


class ErrorDetail(BaseModel):
    field:str = ""
    code: str = Field(default="ERROR")
    message: str = Field(default="Unknown Error")
    target: Optional[str] = Field(default=None)


class ErrorResponse(BaseResponse[Any]):
    success: bool = Field(default=False)
    error_code: str = Field(default="ERROR")
    error_details: list[ErrorDetail] = Field(default=[])
