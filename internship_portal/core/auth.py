"""
Authentication Utility - password hashing and caller identity.

Provides:
- Password hashing with bcrypt
- Signed identity tokens (JWT) handed out at signup/login
- FastAPI dependency resolving the calling user's id

Identity is carried either by `Authorization: Bearer <token>` or by the
plain `X-User-ID` header the web client sends. The header is trusted as-is
unless `require_signed_identity` is switched on.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, Header
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from internship_portal.core.config import Settings, get_settings
from internship_portal.core.errors import AuthError, ValidationError

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Bearer token extractor (optional, falls back to X-User-ID)
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None,
                        settings: Optional[Settings] = None) -> str:
    """Create JWT access token."""
    settings = settings or get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Optional[Settings] = None) -> Optional[dict]:
    """Decode and verify JWT token."""
    settings = settings or get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def issue_token_for(user: dict, settings: Optional[Settings] = None) -> str:
    return create_access_token({"sub": str(user["id"]), "user_type": user["user_type"]}, settings=settings)


def get_caller_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    x_user_id: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> int:
    """
    FastAPI dependency - resolve the id of the calling user.

    Usage:
        @router.get("/me")
        def route(user_id: int = Depends(get_caller_user_id)):
            ...
    """
    if credentials is not None:
        payload = decode_token(credentials.credentials, settings)
        subject = payload.get("sub") if payload else None
        if not subject or not str(subject).isdigit():
            raise AuthError("Invalid or expired token")
        return int(subject)

    if settings.require_signed_identity:
        raise AuthError("Unauthorized: bearer token required")

    if x_user_id is None or x_user_id.strip() == "":
        raise AuthError("Unauthorized: user ID not provided")

    try:
        return int(x_user_id.strip())
    except ValueError:
        raise ValidationError("Invalid user ID")
