# pawpost/core/security.py

from passlib.context import CryptContext
from passlib.exc import PasswordValueError

from pawpost.core.errors import InvalidPassword, MalformedHashError

DEFAULT_ROUNDS = 10

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=DEFAULT_ROUNDS)


def configure_hasher(rounds: int):
    """Set the bcrypt work factor. Called once at startup."""
    pwd_context.update(bcrypt__rounds=rounds)


def hash_password(password: str) -> str:
    try:
        return pwd_context.hash(password)
    except PasswordValueError as exc:
        raise InvalidPassword("password rejected by the hash backend") from exc
    except (TypeError, ValueError) as exc:
        raise MalformedHashError("password could not be hashed") from exc


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """True iff `hashed_password` was produced from `plain_password`.

    An unidentifiable or truncated hash raises MalformedHashError instead of
    returning False, so a corrupt row is not reported as a wrong password.
    A plaintext the backend refuses (NUL bytes) raises InvalidPassword.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except PasswordValueError as exc:
        raise InvalidPassword("password rejected by the hash backend") from exc
    except (TypeError, ValueError) as exc:
        raise MalformedHashError("stored password hash is malformed") from exc
