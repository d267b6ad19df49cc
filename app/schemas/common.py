from typing import Annotated, Any, Generic, Optional, TypeVar

from fastapi import Path
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# ids are 32-bit Integer columns; anything outside is a bad request, not a lookup
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
EntityId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


class CamelModel(BaseModel):
    """Base for everything on the wire: camelCase out, either case in."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    status_code: int
    message: str
    data: Optional[T] = None

    def to_response(self, headers: dict[str, str] | None = None) -> JSONResponse:
        # data is dropped entirely on failures and payload-less successes
        exclude = {"data"} if self.data is None else None
        body = self.model_dump(mode="json", by_alias=True, exclude=exclude)
        return JSONResponse(status_code=self.status_code, content=body, headers=headers)


def envelope(status_code: int, message: str, data=None, headers: dict[str, str] | None = None) -> JSONResponse:
    return ApiResponse[Any](status_code=status_code, message=message, data=data).to_response(headers)
