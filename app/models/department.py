from sqlalchemy import Column, Integer, String
from app.database import Base

class Department(Base):
    __tablename__ = "Departments"

    id = Column("Id", Integer, primary_key=True, index=True)
    department_name = Column("DepartmentName", String(50), nullable=False)
