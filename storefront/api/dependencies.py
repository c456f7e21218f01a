"""FastAPI dependencies for authentication and database."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from storefront.config import Settings, get_settings
from storefront.database import get_db
from storefront.errors import UnauthorizedError
from storefront.models.user import User
from storefront.services.account import AccountService
from storefront.services.cookies import SessionCookieManager
from storefront.services.security import PasswordHasher, TokenIssuer
from storefront.services.user_store import UserStore

logger = logging.getLogger(__name__)

# The session token comes from the cookie, or from a Bearer header for API clients
session_cookie = APIKeyCookie(name=get_settings().session_cookie_name, auto_error=False)
bearer = HTTPBearer(auto_error=False)


def get_password_hasher(settings: Annotated[Settings, Depends(get_settings)]) -> PasswordHasher:
    """Get password hasher using the configured cost factor."""
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def get_token_issuer(settings: Annotated[Settings, Depends(get_settings)]) -> TokenIssuer:
    return TokenIssuer(settings)


def get_cookie_manager(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SessionCookieManager:
    return SessionCookieManager(settings)


def get_user_store(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> UserStore:
    return UserStore(db, hasher)


def get_account_service(
    store: Annotated[UserStore, Depends(get_user_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenIssuer, Depends(get_token_issuer)],
    cookies: Annotated[SessionCookieManager, Depends(get_cookie_manager)],
) -> AccountService:
    """Get account service with dependencies."""
    return AccountService(store, hasher, tokens, cookies)


def get_current_user(
    cookie_token: Annotated[str | None, Depends(session_cookie)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer)],
    store: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> User:
    """Get the current authenticated user from the session token.

    Raises ``InvalidTokenError`` or ``ExpiredTokenError`` for a bad token and
    ``UnauthorizedError`` when there is no token or its user is gone.
    """
    token = cookie_token or (credentials.credentials if credentials else None)
    if not token:
        raise UnauthorizedError()

    user_id = tokens.verify(token)

    user = store.find_by_id(user_id)
    if user is None:
        logger.warning(f"Session token for missing user {user_id}")
        raise UnauthorizedError("The user belonging to this token no longer exists.")

    return user
