"""
Password hashing and token issuance.

Tokens are issued but never verified anywhere in the bot: commands after
/login do not check them, and expiry is the only way a token stops being
valid. There is no revocation list.
"""
from argon2 import PasswordHasher
from argon2 import exceptions as argon2_exceptions
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from typing import Optional

import config
from workout_bot.errors import HashingError, TokenError

# Argon2 password hasher (OWASP recommended)
pwd_hasher = PasswordHasher(
    time_cost=config.ARGON2_TIME_COST,
    memory_cost=config.ARGON2_MEMORY_COST,
    parallelism=config.ARGON2_PARALLELISM,
    hash_len=32,
    salt_len=16,
)

ACCESS_TOKEN_EXPIRE = timedelta(days=config.ACCESS_TOKEN_EXPIRE_DAYS)


def hash_password(password: str) -> str:
    try:
        return pwd_hasher.hash(password)
    except argon2_exceptions.HashingError as e:
        raise HashingError(str(e)) from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_hasher.verify(hashed_password, plain_password)
    except (argon2_exceptions.VerificationError, argon2_exceptions.InvalidHashError):
        # VerifyMismatchError is a VerificationError
        return False
    except (TypeError, ValueError):
        return False


def create_access_token(user_id: int, now: Optional[datetime] = None) -> str:
    """Sign a bearer token for `user_id` that expires ACCESS_TOKEN_EXPIRE after `now`."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "exp": int((issued_at + ACCESS_TOKEN_EXPIRE).timestamp()),
    }
    try:
        return jwt.encode(claims, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)
    except JWTError as e:
        raise TokenError(str(e)) from e
