"""
Authentication / authorization guards.

A guard takes the raw Authorization header and the claims resolved so far and
either returns claims or raises an AuthError. Routes run an ordered tuple of
guards before the handler body; the first failure aborts the call.
"""
import logging
from typing import Callable, Dict, Optional, Tuple
from fastapi import Depends
from fastapi.security import APIKeyHeader
from leavedesk.core.config import settings
from leavedesk.core.security import decode_access_token
from leavedesk.core.exceptions import Unauthenticated, InvalidToken, Forbidden

logger = logging.getLogger(__name__)

# Raw header, so a malformed value can be told apart from a missing one
security = APIKeyHeader(name="Authorization", auto_error=False)

Claims = Dict
Guard = Callable[[Optional[str], Optional[Claims]], Claims]

def require_token(credentials: Optional[str], claims: Optional[Claims]) -> Claims:
    """
    Identity guard: a verifiable bearer token is required.
    No header at all is 401; a header that is present but not a valid
    ``Bearer <token>`` is an invalid token.
    """
    if credentials is None:
        raise Unauthenticated()

    scheme, _, token = credentials.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise InvalidToken(settings.INVALID_TOKEN_STATUS)

    payload = decode_access_token(token.strip())
    if not payload or payload.get("user_id") is None:
        raise InvalidToken(settings.INVALID_TOKEN_STATUS)
    return payload

def require_admin(credentials: Optional[str], claims: Optional[Claims]) -> Claims:
    """Role guard: must run after require_token"""
    if not claims or claims.get("is_admin") is not True:
        logger.warning("[PERMISSIONS] Admin access denied for %s", (claims or {}).get("user_id"))
        raise Forbidden()
    return claims

GUARD_LEVELS: Dict[str, Tuple[Guard, ...]] = {
    "none": (),
    "identity": (require_token,),
    "admin": (require_token, require_admin),
}

def guards_for(level: str) -> Tuple[Guard, ...]:
    try:
        return GUARD_LEVELS[level.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown guard level '{level}'. Use one of: {', '.join(GUARD_LEVELS)}")

def run_guards(guards: Tuple[Guard, ...], credentials: Optional[str]) -> Optional[Claims]:
    claims = None
    for check in guards:
        claims = check(credentials, claims)
    return claims

def require_level(level: str):
    """Dependency running a fixed guard level"""
    guards = guards_for(level)

    def guard_checker(credentials: Optional[str] = Depends(security)) -> Optional[Claims]:
        return run_guards(guards, credentials)
    return guard_checker

def require_configured_level(setting_name: str):
    """Dependency whose guard level is read from settings on every call"""
    def guard_checker(credentials: Optional[str] = Depends(security)) -> Optional[Claims]:
        return run_guards(guards_for(getattr(settings, setting_name)), credentials)
    return guard_checker

get_current_claims = require_level("identity")
get_admin_claims = require_level("admin")
