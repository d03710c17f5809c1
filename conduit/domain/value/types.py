"""Domain value objects for Conduit.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

import re

from pydantic import Field, field_validator

from conduit.domain.value.common import RootValueObject, ValueObject

USERNAME_PATTERN = re.compile(r"^[a-z0-9]+$")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

DEFAULT_PAGE_LIMIT = 20


class Username(RootValueObject[str]):
    """Unique public name of a user.

    Stored lower-cased; only ASCII letters and digits are allowed, so
    lookups are effectively case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Lower-case and validate the username."""
        v = v.lower()
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username must be alphanumeric")
        return v


class Email(RootValueObject[str]):
    """E-mail address, stored lower-cased."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Lower-case and validate the address shape."""
        v = v.lower()
        if not EMAIL_PATTERN.search(v):
            raise ValueError("Email must look like name@domain.tld")
        return v


class Slug(RootValueObject[str]):
    """URL-safe article identifier.

    Lowercase alphanumeric groups separated by single hyphens.
    Examples: 'a-new-day-0k3x9z', 'hello-1a2b3c'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not SLUG_PATTERN.match(v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v


class Page(ValueObject):
    """Pagination window for listings.

    A ``limit`` of 0 means "no limit", matching the behaviour of the
    document store the API was first built on.
    """

    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=0)
    offset: int = Field(default=0, ge=0)

    def apply(self, items: list) -> list:
        """Slice an already sorted list to this window."""
        if self.limit == 0:
            return items[self.offset :]
        return items[self.offset : self.offset + self.limit]
