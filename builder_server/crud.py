# builder_server/crud.py

from sqlalchemy.orm import Session
from builder_server.models import Build, User


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, password_hash: str) -> User:
    user = User(username=username, password_hash=password_hash)
    db.add(user)
    db.commit()
    return user


def create_build(db: Session, user_id: str, bricks: list[dict], name: str | None = None) -> Build:
    build = Build(user_id=user_id, name=name, bricks=bricks)
    db.add(build)
    db.commit()
    return build


def get_build(db: Session, build_id: str) -> Build | None:
    return db.query(Build).filter(Build.id == build_id).first()


def list_recent_builds(db: Session, user_id: str, limit: int = 10) -> list[Build]:
    return (
        db.query(Build)
        .filter(Build.user_id == user_id)
        .order_by(Build.created_at.desc(), Build.pk.desc())
        .limit(limit)
        .all()
    )
