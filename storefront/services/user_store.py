"""User persistence with write-time validation."""

import logging
import re
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from storefront.errors import NotFoundError, ValidationError
from storefront.models.enums import UserRole
from storefront.models.user import DEFAULT_AVATAR, User
from storefront.services.security import PasswordHasher

logger = logging.getLogger(__name__)

# Each repeated group must start with a separator (keeps failed matches linear)
EMAIL_PATTERN = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,3}$")
MIN_PASSWORD_LENGTH = 6

# Fields a profile update may change; id, role and credentials are excluded
UPDATABLE_FIELDS = ("name", "email", "avatar")


def _clean(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def validate_name(name: str | None) -> str | None:
    """Return an error message for an invalid name, else None."""
    if not name:
        return "Name field must be required!"
    words = name.split(" ")
    if len(words) < 2 or not (words[0] and words[1]):
        return "Name contains at least 2 words!"
    return None


def validate_email(email: str | None) -> str | None:
    """Return an error message for an invalid email, else None."""
    if not email:
        return "Email field must be required!"
    if not EMAIL_PATTERN.match(email):
        return "Invalid email!"
    return None


def validate_password(password: str | None) -> str | None:
    """Return an error message for an unacceptable password, else None."""
    if not password:
        return "Password field must be required!"
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters!"
    return None


def validate_role(role: str | None) -> str | None:
    if role not in UserRole.values():
        return "Role is either: user, admin"
    return None


class UserStore:
    """Reads and writes user records.

    Every write is validated before it reaches the database, so a rejected
    write leaves nothing behind. Passwords are hashed here and nowhere else.
    """

    def __init__(self, db: Session, hasher: PasswordHasher):
        self.db = db
        self.hasher = hasher

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == _clean(email)).first()

    def find_by_id(self, user_id: int | str) -> User | None:
        """Get a user by id; ids that are not integers match nothing."""
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            return None
        return self.db.get(User, user_id)

    def find_with_orders(self, user_id: int | str) -> User:
        """Get a user with their orders loaded."""
        user = (
            self.db.query(User)
            .options(selectinload(User.orders))
            .filter(User.id == int(user_id))
            .first()
        )
        if user is None:
            raise NotFoundError(f"No user with this id: {user_id}")
        return user

    def _email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        query = self.db.query(User.id).filter(User.email == email)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first() is not None

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race against a concurrent write of the same email
            self.db.rollback()
            logger.info(f"Unique constraint rejected user write: {e.orig}")
            raise ValidationError({"email": "Email already exists!"}) from e

    def create(self, fields: dict[str, Any]) -> User:
        """Validate and insert a new user.

        ``fields`` holds ``name``, ``email``, ``password`` and
        ``confirm_password``, plus optional ``role`` and ``avatar``.
        """
        data = {key: _clean(value) for key, value in fields.items()}
        name = data.get("name")
        email = data.get("email")
        password = data.get("password")
        confirm_password = data.get("confirm_password")
        role = data.get("role") or UserRole.USER.value

        errors: dict[str, str] = {}
        if message := validate_name(name):
            errors["name"] = message
        if message := validate_email(email):
            errors["email"] = message
        elif self._email_taken(email):
            errors["email"] = "Email already exists!"
        if message := validate_password(password):
            errors["password"] = message
        if not confirm_password:
            errors["confirm_password"] = "Confirm password field must be required!"
        elif confirm_password != password:
            errors["confirm_password"] = "Password and confirm password does not match!"
        if message := validate_role(role):
            errors["role"] = message
        if errors:
            raise ValidationError(errors)

        user = User(
            name=name,
            email=email,
            password_hash=self.hasher.hash(password),
            role=role,
            avatar=data.get("avatar") or DEFAULT_AVATAR,
        )
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        logger.info(f"Created user {user.id} ({user.email})")
        return user

    def apply_updates(self, user: User, fields: dict[str, Any]) -> None:
        """Validate profile fields and set them on ``user`` without committing."""
        data = {
            key: _clean(value)
            for key, value in fields.items()
            if key in UPDATABLE_FIELDS and value is not None
        }

        errors: dict[str, str] = {}
        if "name" in data and (message := validate_name(data["name"])):
            errors["name"] = message
        if "email" in data:
            if message := validate_email(data["email"]):
                errors["email"] = message
            elif self._email_taken(data["email"], exclude_id=user.id):
                errors["email"] = "Email already exists!"
        if "avatar" in data and not data["avatar"]:
            errors["avatar"] = "Avatar must not be empty!"
        if errors:
            raise ValidationError(errors)

        for key, value in data.items():
            setattr(user, key, value)

    def check_password(self, password: str | None) -> None:
        """Raise ValidationError if ``password`` is not acceptable."""
        if message := validate_password(_clean(password)):
            raise ValidationError({"password": message})

    def set_password(self, user: User, new_password: str | None) -> None:
        """Validate and hash a new password onto ``user`` without committing."""
        self.check_password(new_password)
        user.password_hash = self.hasher.hash(_clean(new_password))

    def save(self, user: User) -> User:
        """Commit pending changes to ``user``."""
        self._commit()
        self.db.refresh(user)
        return user

    def update_by_id(self, user_id: int | str, fields: dict[str, Any]) -> User:
        """Validate and apply profile field updates to a user."""
        user = self.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"No user with this id: {user_id}")
        self.apply_updates(user, fields)
        return self.save(user)
