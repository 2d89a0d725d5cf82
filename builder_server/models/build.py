# builder_server/models/build.py

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, JSON
from . import Base
from .user import new_object_id, utcnow


def format_timestamp(value: datetime) -> str:
    # SQLite hands timestamps back without tzinfo; they are stored as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


# -------------------------------
# Build Model
# -------------------------------

class Build(Base):
    """
    A saved set of brick placements.
    Bricks are kept as one embedded JSON list, in the order they were submitted.
    """
    __tablename__ = "builds"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(24), unique=True, index=True, nullable=False, default=new_object_id)
    user_id = Column(String(24), index=True, nullable=False)
    name = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    bricks = Column(JSON, nullable=False, default=list)

    def to_document(self) -> dict:
        document = {
            "_id": self.id,
            "userId": self.user_id,
            "createdAt": format_timestamp(self.created_at),
            "bricks": list(self.bricks or []),
        }
        if self.name is not None:
            document["name"] = self.name
        return document
