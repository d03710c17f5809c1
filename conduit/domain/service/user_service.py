"""User domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError

from conduit.domain.error import NotFoundError, ValidationFailedError
from conduit.domain.model import User
from conduit.domain.repository import UserRepository
from conduit.domain.value import Email, UserId, Username

from .base import Service
from .password_service import PasswordService

BLANK = "can't be blank"
INVALID = "is invalid"
TAKEN = "is already taken"

UPDATABLE_FIELDS = frozenset({"username", "email", "bio", "image", "password"})


class UserService(Service):
    """Domain service for user accounts."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Credential service for digests
        """
        self.user_repository = user_repository
        self.password_service = password_service

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        Args:
            username: Username as typed by the client (any case)

        Returns:
            User entity

        Raises:
            NotFoundError: If no user has this username
        """
        with logfire.span("user_service.get_by_username", username=username):
            user = await self.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username)
                raise NotFoundError("Profile", username)
            return user

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username, returning None for unknown or malformed names."""
        try:
            parsed = Username(username)
        except ValidationError:
            return None
        return await self.user_repository.find_by_username(parsed)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email, returning None for unknown or malformed addresses."""
        try:
            parsed = Email(email)
        except ValidationError:
            return None
        return await self.user_repository.find_by_email(parsed)

    async def register(self, username: str, email: str, password: str) -> User:
        """Register a new user.

        All field problems are collected and reported together.

        Args:
            username: Requested username (lower-cased on save)
            email: Email address (lower-cased on save)
            password: Plain-text password

        Returns:
            The created user

        Raises:
            ValidationFailedError: If any field is blank, malformed or taken
        """
        with logfire.span("user_service.register", username=username):
            errors: dict[str, str] = {}
            parsed_username = await self._check_username(username, None, errors)
            parsed_email = await self._check_email(email, None, errors)
            if not password:
                errors["password"] = BLANK

            if errors:
                logfire.warn("Registration rejected", errors=errors)
                raise ValidationFailedError(errors)

            salt = self.password_service.generate_salt()
            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=parsed_username,
                email=parsed_email,
                password_salt=salt,
                password_digest=self.password_service.hash(password, salt),
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User registered", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def update_user(self, user: User, changes: dict[str, Any]) -> User:
        """Apply a partial update to a user.

        Only keys present in ``changes`` are touched. A new password
        re-derives both salt and digest.

        Args:
            user: The user being updated
            changes: Subset of username, email, bio, image, password

        Returns:
            The saved user

        Raises:
            ValidationFailedError: If username/email are blank, malformed or
                taken by another user, or the password is blank
        """
        with logfire.span(
            "user_service.update_user",
            user_id=str(user.id),
            fields=sorted(changes),
        ):
            errors: dict[str, str] = {}
            update: dict[str, Any] = {}

            if "username" in changes:
                update["username"] = await self._check_username(
                    changes["username"], user.id, errors
                )
            if "email" in changes:
                update["email"] = await self._check_email(
                    changes["email"], user.id, errors
                )
            if "password" in changes:
                if not changes["password"]:
                    errors["password"] = BLANK
                else:
                    salt = self.password_service.generate_salt()
                    update["password_salt"] = salt
                    update["password_digest"] = self.password_service.hash(
                        changes["password"], salt
                    )
            for field in ("bio", "image"):
                if field in changes:
                    update[field] = changes[field]

            if errors:
                logfire.warn("User update rejected", errors=errors)
                raise ValidationFailedError(errors)

            update["updated_at"] = datetime.now()
            saved = await self.user_repository.save(user.model_copy(update=update))
            logfire.info("User updated", user_id=str(saved.id))
            return saved

    async def _check_username(
        self, value: str | None, owner_id: UserId | None, errors: dict[str, str]
    ) -> Username | None:
        """Validate a username and check it is free (or already the owner's)."""
        if not value:
            errors["username"] = BLANK
            return None
        try:
            username = Username(value)
        except ValidationError:
            errors["username"] = INVALID
            return None
        existing = await self.user_repository.find_by_username(username)
        if existing and existing.id != owner_id:
            errors["username"] = TAKEN
        return username

    async def _check_email(
        self, value: str | None, owner_id: UserId | None, errors: dict[str, str]
    ) -> Email | None:
        """Validate an email and check it is free (or already the owner's)."""
        if not value:
            errors["email"] = BLANK
            return None
        try:
            email = Email(value)
        except ValidationError:
            errors["email"] = INVALID
            return None
        existing = await self.user_repository.find_by_email(email)
        if existing and existing.id != owner_id:
            errors["email"] = TAKEN
        return email
