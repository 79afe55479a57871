# app/models/user.py
from sqlalchemy import Column, DateTime, Integer, String

from app.database import Base
from app.models.task import utcnow

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    # Google / OAuth fields
    google_id = Column(String(255), unique=True, index=True, nullable=False)
    email = Column(String(255), nullable=False)
    display_name = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    picture = Column(String(1024), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_login = Column(DateTime(timezone=True), nullable=False, default=utcnow)
