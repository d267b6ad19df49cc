from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.department import Department
from app.schemas.common import ApiResponse, EntityId, envelope
from app.schemas.department import DepartmentDto, DepartmentOut
from app.utils.errors import INVALID_REQUEST, internal_error_message, parse_body
from app.utils.mapping import department_from_dto

import logging
logger = logging.getLogger("app.departments")

router = APIRouter(prefix="/api/Department", tags=["Department"])

NOT_FOUND = "Department not found"


@router.get("/Department-List", response_model=ApiResponse[list[DepartmentOut]])
def get_departments(db: Session = Depends(get_db)):
    try:
        rows = db.query(Department).order_by(Department.id).all()
        items = [DepartmentOut.model_validate(r) for r in rows]
        return envelope(200, "Department list retrieved successfully.", items)
    except Exception as ex:
        logger.exception("Department list failed")
        return envelope(500, internal_error_message(ex))


@router.post("/Add-Department", response_model=ApiResponse[DepartmentOut])
def add_department(body: DepartmentDto, db: Session = Depends(get_db)):
    try:
        dept = department_from_dto(body)
        db.add(dept)
        db.commit()
        db.refresh(dept)

        logger.info("Department %s added: %s", dept.id, dept.department_name)
        return envelope(200, "Department added successfully.", DepartmentOut.model_validate(dept))
    except Exception as ex:
        db.rollback()
        logger.exception("Add department failed")
        return envelope(500, internal_error_message(ex))


# body is validated after the lookup: an unknown id is a 404 whatever was sent
@router.put("/Edit-Department/{id}", response_model=ApiResponse[DepartmentOut])
def edit_department(
    id: EntityId,
    payload: Any = Body(..., examples=[{"departmentName": "Engineering"}]),
    db: Session = Depends(get_db),
):
    try:
        dept = db.get(Department, id)
        if not dept:
            logger.warning("Edit department %s: not found", id)
            return envelope(404, NOT_FOUND)

        body = parse_body(DepartmentDto, payload)
        if body is None:
            return envelope(400, INVALID_REQUEST)

        department_from_dto(body, dept)
        db.commit()
        db.refresh(dept)

        logger.info("Department %s updated", dept.id)
        return envelope(200, "Department updated successfully.", DepartmentOut.model_validate(dept))
    except Exception as ex:
        db.rollback()
        logger.exception("Edit department %s failed", id)
        return envelope(500, internal_error_message(ex))


@router.delete("/Delete-Department/{id}", response_model=ApiResponse[Any])
def delete_department(id: EntityId, db: Session = Depends(get_db)):
    try:
        dept = db.get(Department, id)
        if not dept:
            logger.warning("Delete department %s: not found", id)
            return envelope(404, NOT_FOUND)

        db.delete(dept)
        db.commit()

        logger.info("Department %s deleted", id)
        return envelope(200, "Department deleted successfully.")
    except Exception as ex:
        db.rollback()
        logger.exception("Delete department %s failed", id)
        return envelope(500, internal_error_message(ex))
