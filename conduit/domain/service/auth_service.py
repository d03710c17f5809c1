"""Authentication domain service.

Turns credentials into users and tokens into users. Everything that
needs "who is asking" goes through here before touching the stores.
"""

from uuid import UUID

import logfire
from pydantic import ValidationError

from conduit.domain.error import NotAuthenticatedError, ValidationFailedError
from conduit.domain.model import User
from conduit.domain.repository import UserRepository
from conduit.domain.value import Email, UserId
from conduit.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService
from .password_service import PasswordService
from .user_service import BLANK, INVALID


class AuthService(Service):
    """Domain service for login and session resolution."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            password_service: Credential service
            jwt_service: Token service
        """
        self.user_repository = user_repository
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Args:
            email: Email address (any case)
            password: Plain-text password

        Returns:
            The matching user

        Raises:
            ValidationFailedError: If a field is blank or the pair is wrong.
                Unknown email and wrong password are indistinguishable.
        """
        with logfire.span("auth_service.authenticate"):
            errors: dict[str, str] = {}
            if not email:
                errors["email"] = BLANK
            if not password:
                errors["password"] = BLANK
            if errors:
                raise ValidationFailedError(errors)

            user = await self._find_by_email(email)
            if user is None or not self.password_service.verify(
                password, user.password_salt, user.password_digest
            ):
                logfire.warn("Login failed")
                raise ValidationFailedError({"email or password": INVALID})

            logfire.info("Login succeeded", user_id=str(user.id))
            return user

    def issue_token(self, user: User) -> str:
        """Issue a session token for a user."""
        return self.jwt_service.create_token(str(user.id), user.username.root)

    async def resolve_user(self, token: str | None) -> User:
        """Resolve the acting user of a protected operation.

        Args:
            token: Raw JWT, or None when the client sent none

        Returns:
            The user the token was issued to

        Raises:
            NotAuthenticatedError: If the token is missing, invalid, expired
                or names a user that no longer exists
        """
        if not token:
            raise NotAuthenticatedError()
        with logfire.span("auth_service.resolve_user"):
            try:
                payload = self.jwt_service.verify_token(token)
                user_id = UserId(UUID(payload.id))
            except (JWTError, ValueError) as e:
                raise NotAuthenticatedError(str(e))

            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Token for unknown user", user_id=payload.id)
                raise NotAuthenticatedError("Unknown user")
            return user

    async def resolve_viewer(self, token: str | None) -> User | None:
        """Resolve an optional viewer.

        No token means an anonymous viewer; a token that is present but
        bad is still rejected.
        """
        if not token:
            return None
        return await self.resolve_user(token)

    async def _find_by_email(self, email: str) -> User | None:
        """Look up the account for an email, tolerating malformed input."""
        try:
            parsed = Email(email)
        except ValidationError:
            return None
        return await self.user_repository.find_by_email(parsed)
