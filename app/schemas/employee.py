from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer, field_validator

from app.schemas.common import CamelModel
from app.schemas.department import DepartmentOut


class EmployeeDto(CamelModel):
    name: str = Field(..., min_length=1, max_length=30)
    # strict: JSON booleans and numeric strings are not ints
    age: int = Field(..., ge=21, le=100, strict=True)
    department_id: int = Field(..., strict=True)
    salary: Decimal

    @field_validator("name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class EmployeeOut(CamelModel):
    id: int
    name: str
    age: int
    department_id: int
    department: Optional[DepartmentOut] = None
    salary: Decimal

    # JSON number, not pydantic's default decimal string
    @field_serializer("salary", when_used="json")
    def salary_as_number(self, v: Decimal) -> float:
        return float(v)
