"""Account service: registration, sign-in and profile management."""

import logging
from typing import Any

from fastapi import Response

from storefront.errors import InvalidCredentials, UnauthenticatedRequest, UnauthorizedError
from storefront.models.user import User
from storefront.services.cookies import SessionCookieManager
from storefront.services.security import PasswordHasher, TokenIssuer
from storefront.services.user_store import UserStore

logger = logging.getLogger(__name__)


class AccountService:
    """Service for account-related operations.

    Nothing is held between requests: the caller resolves the authenticated
    user for each request (see ``get_current_user``) and passes it in.
    """

    def __init__(
        self,
        store: UserStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        cookies: SessionCookieManager,
    ):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens
        self.cookies = cookies

    def _start_session(self, user: User, response: Response) -> None:
        token = self.tokens.issue(user.id)
        self.cookies.attach(response, token)

    def register(self, fields: dict[str, Any], response: Response) -> User:
        """Create a user and sign them in."""
        # Fail before writing anything if sessions cannot be issued
        self.tokens.ensure_configured()
        user = self.store.create(fields)
        self._start_session(user, response)
        logger.info(f"Registered user {user.id}")
        return user

    def sign_in(self, email: str | None, password: str | None, response: Response) -> User:
        """Check credentials and start a session.

        A missing account and a wrong password are reported with different
        messages.
        """
        if not email or not password:
            raise UnauthenticatedRequest()

        user = self.store.find_by_email(email)
        if user is None:
            logger.warning(f"Sign-in failed: unknown email {email!r}")
            raise InvalidCredentials("Invalid email!")

        if not self.hasher.verify(password, user.password_hash):
            logger.warning(f"Sign-in failed: wrong password for user {user.id}")
            raise InvalidCredentials("Wrong password!")

        self._start_session(user, response)
        logger.info(f"User {user.id} signed in")
        return user

    def sign_out(self, user: User | None, response: Response) -> None:
        """Clear the session cookie. The token itself stays valid until it expires."""
        if user is None:
            raise UnauthorizedError()
        self.cookies.clear(response)
        logger.info(f"User {user.id} signed out")

    def get_profile(self, user: User, include_orders: bool = False) -> User:
        """Get the current user, optionally with their orders loaded."""
        if include_orders:
            return self.store.find_with_orders(user.id)
        return user

    def change_password(self, user: User, password: str, new_password: str) -> User:
        """Rotate the password after re-checking the current one."""
        self._check_current_password(user, password)
        self.store.set_password(user, new_password)
        user = self.store.save(user)
        logger.info(f"User {user.id} changed their password")
        return user

    def update_profile(
        self,
        user: User,
        fields: dict[str, Any],
        password: str | None = None,
        new_password: str | None = None,
    ) -> User:
        """Update profile fields, and the password when both passwords are given.

        The current password is checked before anything is changed, so a
        wrong password leaves the whole record untouched.
        """
        rotate = bool(password and new_password)
        if rotate:
            self._check_current_password(user, password)
            self.store.check_password(new_password)

        self.store.apply_updates(user, fields)
        if rotate:
            self.store.set_password(user, new_password)
        user = self.store.save(user)

        if rotate:
            logger.info(f"User {user.id} updated their profile and password")
        else:
            logger.info(f"User {user.id} updated their profile")
        return user

    def _check_current_password(self, user: User, password: str) -> None:
        if not self.hasher.verify(password, user.password_hash):
            logger.warning(f"Password change rejected for user {user.id}: wrong password")
            raise InvalidCredentials("Wrong password!")
