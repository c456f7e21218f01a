"""Password hashing and JWT session tokens."""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from storefront.config import Settings
from storefront.errors import ConfigurationError, ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)


@lru_cache
def _crypt_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


class PasswordHasher:
    """Salted bcrypt hashing with a configurable cost factor."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self.context = _crypt_context(rounds)

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        try:
            return self.context.verify(plain_password, hashed_password)
        except ValueError:
            # Not a hash this context recognises
            return False


class TokenIssuer:
    """Issues and verifies signed, time-limited session tokens.

    The payload is ``{"id": "<user id>", "exp": <expiry>}``. Tokens cannot be
    revoked; a token stays valid until its expiry even after logout.
    """

    def __init__(self, settings: Settings):
        self.secret = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.expiration = timedelta(days=settings.jwt_expiration_days)

    def ensure_configured(self) -> str:
        """Return the signing secret, or raise ConfigurationError if there is none."""
        if not self.secret:
            logger.error("JWT secret is not configured; refusing to handle session tokens")
            raise ConfigurationError()
        return self.secret

    def issue(self, user_id: int | str) -> str:
        """Create a JWT access token for a user."""
        secret = self.ensure_configured()
        expire = datetime.now(UTC) + self.expiration
        to_encode = {"id": str(user_id), "exp": expire}
        return jwt.encode(to_encode, secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """Decode a token and return the user id it was issued for.

        Raises:
            ExpiredTokenError: the signature is valid but the token has expired.
            InvalidTokenError: the token is malformed or signed with another key.
        """
        secret = self.ensure_configured()
        try:
            payload = jwt.decode(token, secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except JWTError as e:
            logger.warning(f"Rejected session token: {e}")
            raise InvalidTokenError() from e

        user_id = payload.get("id")
        if not user_id:
            raise InvalidTokenError()
        return str(user_id)
