from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base

class Employee(Base):
    __tablename__ = "Employees"

    id = Column("Id", Integer, primary_key=True, index=True)
    name = Column("Name", String(30), nullable=False)
    age = Column("Age", Integer, nullable=False)

    department_id = Column("DepartmentId", Integer, ForeignKey("Departments.Id"), nullable=False, index=True)
    salary = Column("Salary", Numeric(18, 2), nullable=False)

    # one-way: Department has no collection, so deletes never touch employees
    department = relationship("Department")
