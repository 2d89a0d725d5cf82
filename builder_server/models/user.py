# builder_server/models/user.py

import secrets
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from . import Base


def new_object_id() -> str:
    return secrets.token_hex(12)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores username and bcrypt password hash for authentication.
    """
    __tablename__ = "users"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(24), unique=True, index=True, nullable=False, default=new_object_id)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
