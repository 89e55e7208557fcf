from typing import Optional

from passlib.context import CryptContext

from .exceptions import HashingError


BCRYPT_ROUNDS = 10

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__default_rounds=BCRYPT_ROUNDS)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str, rounds: Optional[int] = None) -> str:
    """Return a salted bcrypt hash of *password*.

    ``rounds`` overrides the cost factor configured on ``pwd_context``.
    """
    context = pwd_context if rounds is None else pwd_context.copy(bcrypt__default_rounds=rounds)
    try:
        return context.hash(password)
    except (TypeError, ValueError) as exc:
        raise HashingError(f"Could not hash password: {exc}") from exc
