from pydantic import Field, field_validator

from app.schemas.common import CamelModel


class DepartmentDto(CamelModel):
    department_name: str = Field(..., min_length=1, max_length=50)

    @field_validator("department_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("departmentName must not be blank")
        return v


class DepartmentOut(CamelModel):
    id: int
    department_name: str
