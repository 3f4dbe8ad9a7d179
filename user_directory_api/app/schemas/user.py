"""
Pydantic models for user data.

``UserCreate`` and ``UserUpdate`` describe the accepted request
payloads, ``UserRead`` is the stored record as returned by the API.
The envelope models (``UserResponse`` etc.) document the JSON shapes
of the responses; every body carries a ``success`` flag.
"""

from enum import Enum
from typing import Annotated, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


def check_email(value: str) -> str:
    """Reject malformed addresses but keep the value exactly as sent."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


Email = Annotated[str, AfterValidator(check_email), Field(json_schema_extra={"format": "email"})]


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class UserCreate(BaseModel):
    """Schema for creating a user.  All four fields are required."""

    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1, examples=["Alice"])
    email: Email = Field(..., examples=["alice@mail.com"])
    role: UserRole = Field(..., examples=["user"])
    status: UserStatus = Field(..., examples=["active"])


class UserUpdate(BaseModel):
    """Schema for a partial update.

    Any subset of the fields may be supplied, but at least one.  Unknown
    keys and explicit ``null`` values are rejected.
    """

    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    name: Optional[str] = Field(None, min_length=1)
    email: Optional[Email] = None
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None

    @model_validator(mode="after")
    def check_supplied_fields(self) -> "UserUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        nulls = sorted(f for f in self.model_fields_set if getattr(self, f) is None)
        if nulls:
            raise ValueError(f"Fields must not be null: {', '.join(nulls)}")
        return self

    def changes(self) -> dict:
        """Return only the fields the client supplied."""
        return self.model_dump(exclude_unset=True)


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    name: str
    email: str
    role: UserRole
    status: UserStatus


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class UserResponse(MessageResponse):
    data: UserRead


class UserListResponse(BaseModel):
    success: bool = True
    data: List[UserRead]


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: Optional[List[str]] = None
