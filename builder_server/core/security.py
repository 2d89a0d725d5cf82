# builder_server/core/security.py

from fastapi import Request
from passlib.context import CryptContext
from passlib.exc import PasswordValueError


DEFAULT_BCRYPT_ROUNDS = 10


def build_password_context(rounds: int = DEFAULT_BCRYPT_ROUNDS) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def get_pwd_context(request: Request) -> CryptContext:
    return request.app.state.pwd_context


def get_password_hash(pwd_context: CryptContext, password: str) -> str:
    """
    Raises ``PasswordValueError`` for passwords bcrypt refuses (NUL bytes, oversize).
    """
    return pwd_context.hash(password)


def verify_password(pwd_context: CryptContext, plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except PasswordValueError:
        # A password bcrypt cannot hash can never match a stored hash
        return False
