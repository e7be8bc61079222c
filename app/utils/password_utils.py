# app/utils/password_utils.py

from passlib.context import CryptContext
from fastapi.concurrency import run_in_threadpool
import logging

from ..core.config import get_settings

logger = logging.getLogger(__name__)

# Create the context once and reuse it. Every hash gets its own random salt.
bcrypt_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().BCRYPT_ROUNDS,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verifies a plain-text password against a hashed password.
    """
    return bcrypt_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hashes a plain-text password.
    """
    try:
        return bcrypt_context.hash(password)
    except Exception:
        logger.exception("Error occurred while hashing password.")
        raise


async def hash_password_async(password: str) -> str:
    """bcrypt is CPU bound; run it in the threadpool to keep the event loop free."""
    return await run_in_threadpool(get_password_hash, password)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    return await run_in_threadpool(verify_password, plain_password, hashed_password)
