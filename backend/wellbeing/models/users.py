# wellbeing/models/users.py

from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from wellbeing.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    department = Column(String(100), nullable=True)
    team_id = Column(Integer, nullable=True)

    is_admin = Column(Boolean, nullable=False, default=False)
    role = Column(String(30), nullable=False, default="Employee")  # Employee, Manager, Administrator

    join_date = Column(DateTime, server_default=func.now())
    last_login_at = Column(DateTime, nullable=True)
