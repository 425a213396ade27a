from sqlalchemy import Column, Integer, String

from app.database import Base
from app.utils.timestamps import iso_now


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    phone_number = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    specialization = Column(String, nullable=False)
    status = Column(String, default="available", nullable=False)
    created_at = Column(String, default=iso_now, nullable=False)
    updated_at = Column(String, default=iso_now, onupdate=iso_now, nullable=False)
