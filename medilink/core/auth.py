import logging
import uuid
from typing import Any

from fastapi import Depends
from fastapi.security import APIKeyCookie, HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from sqlmodel import Session, select

from medilink.core.config import get_settings
from medilink.core.errors import AuthError, AuthorizationError
from medilink.database import get_session
from medilink.models.user import User

settings = get_settings()
logger = logging.getLogger(__name__)

# The identity provider sets the session token as a cookie; API clients
# may send it as a Bearer header instead. auto_error=False on both so a
# missing token surfaces as our own AuthError.
cookie_scheme = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)


def decode_session_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a session token (JWT) issued by the identity provider.

    Verification:
      - signature (AUTH_JWT_ALG using AUTH_JWT_SECRET)
      - expiration time (exp), when present
      - audience is NOT verified

    Raises:
        AuthError: if token is invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            settings.AUTH_JWT_SECRET,
            algorithms=[settings.AUTH_JWT_ALG],
            options={"verify_aud": False},
        )
    except JWTError:
        raise AuthError("Invalid or expired session")


def _default_name_from_email(email: str) -> str:
    """
    Derive a default display name from email if the token carries none.
    """
    if "@" in email:
        return email.split("@", 1)[0]
    return email


def get_current_user(
    cookie_token: str | None = Depends(cookie_scheme),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> User:
    """
    Resolve the caller from the session token.

    Flow:
      1. Take the token from the session cookie, else the Bearer header.
      2. Decode JWT => extract 'sub' (user id), 'email', optional 'name'.
      3. Find the user row; auto-provision a non-admin row if missing.

    Returns:
        The authenticated User. Handlers pass it (or its id) explicitly
        into every service call.

    Raises:
        AuthError: no token, bad token, or token missing required claims.
    """
    token = cookie_token or (credentials.credentials if credentials else None)
    if not token:
        raise AuthError("Unauthorized")

    payload = decode_session_token(token)
    sub = payload.get("sub")
    email = payload.get("email")

    if not sub or not email:
        raise AuthError("Session missing sub/email")

    try:
        sub_uuid = uuid.UUID(sub)
    except ValueError:
        raise AuthError("Invalid sub in session")

    user = session.exec(select(User).where(User.id == sub_uuid)).first()

    # Admin must be promoted manually; new rows are never admins.
    if user is None:
        user = User(
            id=sub_uuid,
            email=email,
            name=payload.get("name") or _default_name_from_email(email),
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        logger.info("Provisioned user %s", user.id)

    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """
    Enforce admin flag.

    Raises:
        AuthorizationError: if the caller is not an admin.
    """
    if not user.is_admin:
        raise AuthorizationError("Admin access required")
    return user
