# builder_server/api/auth.py

import logging
from fastapi import APIRouter, Depends
from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from builder_server import crud
from builder_server.core.errors import (
    AuthenticationError,
    ConflictError,
    InternalError,
    ValidationError,
)
from builder_server.core.security import get_password_hash, get_pwd_context, verify_password
from builder_server.database import get_db
from builder_server.schemas import Credentials


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6

MISSING_CREDENTIALS = "Username and password are required"
INVALID_CREDENTIALS = "Invalid username or password"
INVALID_PASSWORD = "Password contains unsupported characters"


def validate_signup(username: str | None, password: str | None):
    if not username or not password:
        raise ValidationError(MISSING_CREDENTIALS)
    if len(username) < MIN_USERNAME_LENGTH:
        raise ValidationError(f"Username must be at least {MIN_USERNAME_LENGTH} characters")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


def authenticate_user(db: Session, pwd_context: CryptContext, username: str, password: str):
    user = crud.get_user_by_username(db, username)
    if not user or not verify_password(pwd_context, password, user.password_hash):
        return None
    return user


@router.post("/signup")
def signup(
    body: Credentials,
    db: Session = Depends(get_db),
    pwd_context: CryptContext = Depends(get_pwd_context),
):
    validate_signup(body.username, body.password)

    try:
        password_hash = get_password_hash(pwd_context, body.password)
    except PasswordValueError:
        raise ValidationError(INVALID_PASSWORD)
    except ValueError as e:
        logger.exception("Hashing password failed for %s", body.username)
        raise InternalError(str(e))

    try:
        if crud.get_user_by_username(db, body.username):
            raise ConflictError("Username already exists")
        crud.create_user(db, body.username, password_hash)
    except IntegrityError:
        # Lost a race with a concurrent signup; the unique index decided
        db.rollback()
        raise ConflictError("Username already exists")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Signup failed for %s", body.username)
        raise InternalError(str(e))

    logger.info("New user created: %s", body.username)
    return {"success": True, "message": "Account created successfully"}


@router.post("/login")
def login(
    body: Credentials,
    db: Session = Depends(get_db),
    pwd_context: CryptContext = Depends(get_pwd_context),
):
    if not body.username or not body.password:
        raise ValidationError(MISSING_CREDENTIALS)

    try:
        user = authenticate_user(db, pwd_context, body.username, body.password)
    except (SQLAlchemyError, ValueError) as e:
        # ValueError here means a malformed stored hash, not bad user input
        logger.exception("Login failed for %s", body.username)
        raise InternalError(str(e))

    if not user:
        raise AuthenticationError(INVALID_CREDENTIALS)

    logger.info("User logged in: %s", user.username)
    return {
        "success": True,
        "userId": user.id,
        "username": user.username,
        "message": "Login successful"
    }
