from app.models.department import Department
from app.models.employee import Employee
from app.schemas.department import DepartmentDto
from app.schemas.employee import EmployeeDto


# DTO -> entity. Only the fields a client may set are copied; ids stay server-side.

def department_from_dto(dto: DepartmentDto, target: Department | None = None) -> Department:
    if target is None:
        target = Department()
    target.department_name = dto.department_name
    return target


def employee_from_dto(dto: EmployeeDto, target: Employee | None = None) -> Employee:
    if target is None:
        target = Employee()
    target.name = dto.name
    target.age = dto.age
    target.department_id = dto.department_id
    target.salary = dto.salary
    return target
