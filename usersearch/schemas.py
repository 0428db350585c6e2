from enum import Enum, IntEnum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OrderField(str, Enum):
    ID = "Id"
    NAME = "Name"
    AGE = "Age"
    DEFAULT = ""


class OrderBy(IntEnum):
    DESC = -1
    AS_IS = 0
    ASC = 1

    @classmethod
    def from_code(cls, code: int) -> "OrderBy":
        """Map a wire code to a direction; unknown codes mean no reordering."""
        if code == cls.ASC:
            return cls.ASC
        if code == cls.DESC:
            return cls.DESC
        return cls.AS_IS


class ErrorTag(str, Enum):
    """Symbolic tags carried in 400 bodies. Version 1 of the vocabulary."""

    BAD_ORDER_FIELD = "ErrorBadOrderField"


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(alias="Id")
    name: str = Field(alias="Name")
    age: int = Field(alias="Age")
    about: str = Field(default="", alias="About")
    gender: str = Field(default="", alias="Gender")


class SearchErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(alias="Error")


class SearchRequest(BaseModel):
    limit: int = 0
    offset: int = 0
    query: str = ""
    order_field: str = OrderField.DEFAULT.value
    order_by: int = OrderBy.AS_IS.value


class SearchResponse(BaseModel):
    users: List[User]
    next_page: bool = False


class ErrorResponse(BaseModel):
    detail: str


class RootResponse(BaseModel):
    msg: str


class HealthResponse(BaseModel):
    status: str
