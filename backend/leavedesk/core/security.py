from datetime import datetime, timedelta
from typing import Optional
import logging

from jose import JWTError, jwt
import bcrypt
from leavedesk.core.config import settings

logger = logging.getLogger(__name__)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a bcrypt hash.
    Returns False for empty input or a malformed stored hash instead of raising.
    """
    if not plain_password or not hashed_password:
        return False
    try:
        if isinstance(hashed_password, bytes):
            hash_bytes = hashed_password
        else:
            hash_bytes = hashed_password.encode('utf-8')

        return bcrypt.checkpw(plain_password.encode('utf-8'), hash_bytes)
    except ValueError as e:
        logger.warning("[SECURITY] Password verification error: %s", e)
        return False

def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.
    Returns the hash as a string for database storage.
    """
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT carrying the given claims plus an expiry"""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})

    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)

def decode_access_token(token: str) -> Optional[dict]:
    """Decode and verify a JWT. Returns None when it is malformed, tampered with or expired."""
    if not token:
        return None
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.warning("[SECURITY] Token decode failed: %s", e)
        return None

def create_user_token(user_id: str, is_admin: bool) -> str:
    """Issue the identity + role token handed out on sign in"""
    return create_access_token({"user_id": user_id, "is_admin": bool(is_admin)})
