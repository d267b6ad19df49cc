from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session, joinedload

from app.database import get_db
from app.models.employee import Employee
from app.schemas.common import ApiResponse, EntityId, envelope
from app.schemas.employee import EmployeeDto, EmployeeOut
from app.utils.errors import INVALID_REQUEST, internal_error_message, parse_body
from app.utils.mapping import employee_from_dto

import logging
logger = logging.getLogger("app.employees")

router = APIRouter(prefix="/api/Employee", tags=["Employee"])

NOT_FOUND = "Employee not found"

EMPLOYEE_EXAMPLE = {"name": "Jane Doe", "age": 30, "departmentId": 1, "salary": 55000.00}


def _load_with_department(db: Session, employee_id: int) -> Employee:
    # explicit follow-up query so the response carries the department row
    return (
        db.query(Employee)
        .options(joinedload(Employee.department))
        .filter(Employee.id == employee_id)
        .one()
    )


@router.get("/Employee-List", response_model=ApiResponse[list[EmployeeOut]])
def get_employees(db: Session = Depends(get_db)):
    try:
        rows = (
            db.query(Employee)
            .options(joinedload(Employee.department))
            .order_by(Employee.id)
            .all()
        )
        items = [EmployeeOut.model_validate(r) for r in rows]
        return envelope(200, "Employee list retrieved successfully.", items)
    except Exception as ex:
        logger.exception("Employee list failed")
        return envelope(500, internal_error_message(ex))


@router.post("/Add-Employee", response_model=ApiResponse[EmployeeOut])
def add_employee(
    body: EmployeeDto = Body(..., examples=[EMPLOYEE_EXAMPLE]),
    db: Session = Depends(get_db),
):
    try:
        emp = employee_from_dto(body)
        db.add(emp)
        db.commit()

        emp = _load_with_department(db, emp.id)

        logger.info("Employee %s added (department %s)", emp.id, emp.department_id)
        return envelope(200, "Employee added successfully.", EmployeeOut.model_validate(emp))
    except Exception as ex:
        db.rollback()
        logger.exception("Add employee failed")
        return envelope(500, internal_error_message(ex))


@router.put("/Edit-Employee/{id}", response_model=ApiResponse[EmployeeOut])
def edit_employee(
    id: EntityId,
    payload: Any = Body(..., examples=[EMPLOYEE_EXAMPLE]),
    db: Session = Depends(get_db),
):
    try:
        emp = db.get(Employee, id)
        if not emp:
            logger.warning("Edit employee %s: not found", id)
            return envelope(404, NOT_FOUND)

        body = parse_body(EmployeeDto, payload)
        if body is None:
            return envelope(400, INVALID_REQUEST)

        employee_from_dto(body, emp)
        db.commit()

        emp = _load_with_department(db, id)

        logger.info("Employee %s updated", id)
        return envelope(200, "Employee updated successfully.", EmployeeOut.model_validate(emp))
    except Exception as ex:
        db.rollback()
        logger.exception("Edit employee %s failed", id)
        return envelope(500, internal_error_message(ex))


@router.delete("/Delete-Employee/{id}", response_model=ApiResponse[Any])
def delete_employee(id: EntityId, db: Session = Depends(get_db)):
    try:
        emp = db.get(Employee, id)
        if not emp:
            logger.warning("Delete employee %s: not found", id)
            return envelope(404, NOT_FOUND)

        db.delete(emp)
        db.commit()

        logger.info("Employee %s deleted", id)
        return envelope(200, "Employee deleted successfully.")
    except Exception as ex:
        db.rollback()
        logger.exception("Delete employee %s failed", id)
        return envelope(500, internal_error_message(ex))
