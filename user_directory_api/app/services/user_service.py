"""
Business logic for users.

``UserService`` keeps user records in memory, in insertion order,
together with the counter used to assign ids.  One instance is created
per application (see ``create_app``) and handed to the endpoints via
a dependency, so tests get a fresh, empty store with every app.

No locking is applied: concurrent writes from several worker threads
may race.  Records live only as long as the process.
"""

import logging
import re
from typing import Any, List, Mapping, Union

from pydantic import ValidationError as SchemaError

from ..core.exceptions import NotFoundError, ValidationError
from ..schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "role", "status")

_ID_RE = re.compile(r"\s*([+-]?[0-9]+)")


def parse_user_id(raw: Union[str, int]) -> int:
    """Convert a path parameter to an integer id.

    Leading whitespace is skipped and the leading run of digits (with an
    optional sign) is used, so ``"7abc"`` and ``"7.0"`` both give ``7``.
    Raises ``ValidationError`` when no digits lead the value.
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    match = _ID_RE.match(str(raw))
    if match is None:
        raise ValidationError("Invalid user ID")
    return int(match.group(1))


def schema_errors(exc: SchemaError) -> List[str]:
    """Flatten a pydantic error into ``"field: message"`` strings."""
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg", "Invalid value")
        messages.append(f"{field}: {msg}" if field else msg)
    return messages


class UserService:
    """In-memory user store."""

    def __init__(self) -> None:
        self._users: List[UserRead] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._users)

    def create_user(self, payload: Any) -> UserRead:
        """Validate ``payload`` and append a new user.

        Every one of ``name``, ``email``, ``role`` and ``status`` must be
        present and non-empty; the id counter only advances on success.
        """
        if not isinstance(payload, Mapping):
            raise ValidationError("All fields are required", list(REQUIRED_FIELDS))
        missing = [field for field in REQUIRED_FIELDS if not payload.get(field)]
        if missing:
            raise ValidationError(
                "All fields are required",
                [f"{field}: Field required" for field in missing],
            )
        try:
            data = UserCreate.model_validate(
                {field: payload[field] for field in REQUIRED_FIELDS}
            )
        except SchemaError as exc:
            errors = schema_errors(exc)
            raise ValidationError(errors[0], errors) from exc

        user = UserRead(id=self._next_id, **data.model_dump())
        self._next_id += 1
        self._users.append(user)
        logger.info("Created user %s <%s>", user.id, user.email)
        return user

    def list_users(self) -> List[UserRead]:
        """Return all users in creation order."""
        return list(self._users)

    def get_user(self, user_id: Union[str, int]) -> UserRead:
        uid = parse_user_id(user_id)
        for user in self._users:
            if user.id == uid:
                return user
        raise NotFoundError("User not found")

    def update_user(self, user_id: Union[str, int], payload: Any) -> UserRead:
        """Merge the supplied fields into an existing user.

        The id and the payload are validated before the lookup, so an
        invalid payload is reported as such even for an unknown id.
        Fields absent from ``payload`` keep their previous values.
        """
        uid = parse_user_id(user_id)
        if not isinstance(payload, Mapping):
            raise ValidationError("Request body must be a JSON object")
        try:
            changes = UserUpdate.model_validate(dict(payload)).changes()
        except SchemaError as exc:
            errors = schema_errors(exc)
            raise ValidationError(errors[0], errors) from exc

        user = self.get_user(uid)
        for field, value in changes.items():
            setattr(user, field, value)
        logger.info("Updated user %s: %s", uid, ", ".join(sorted(changes)))
        return user

    def delete_user(self, user_id: Union[str, int]) -> None:
        """Remove a user by id."""
        uid = parse_user_id(user_id)
        for index, user in enumerate(self._users):
            if user.id == uid:
                del self._users[index]
                logger.info("Deleted user %s", uid)
                return
        raise NotFoundError("User not found")
