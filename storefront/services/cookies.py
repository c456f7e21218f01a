"""Session cookie handling."""

from datetime import UTC, datetime, timedelta

from fastapi import Response

from storefront.config import Settings

EPOCH = datetime.fromtimestamp(0, UTC)


class SessionCookieManager:
    """Carries the session token in an HttpOnly, SameSite=strict cookie."""

    def __init__(self, settings: Settings):
        self.name = settings.session_cookie_name
        self.lifetime = timedelta(days=settings.jwt_expiration_days)
        self.secure = settings.is_production

    def attach(self, response: Response, token: str) -> None:
        """Set the session cookie on a response."""
        response.set_cookie(
            key=self.name,
            value=token,
            expires=datetime.now(UTC) + self.lifetime,
            path="/",
            httponly=True,
            samesite="strict",
            secure=self.secure,
        )

    def clear(self, response: Response) -> None:
        """Overwrite the session cookie with an empty, already-expired one."""
        response.set_cookie(
            key=self.name,
            value="",
            expires=EPOCH,
            path="/",
            httponly=True,
            samesite="strict",
            secure=self.secure,
        )
