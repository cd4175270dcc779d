"""User aggregate: a client or seller known to the backend.

E-mail addresses are stored trimmed and lower-cased, so uniqueness checks compare
them case-insensitively.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String

from expirapp.domain import commerce
from expirapp.identity.user.events import UserRegistered, UserRemoved, UserUpdated

_UNSET = object()

_FORBIDDEN_EMAIL_CHARS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def normalize_email(email):
    return email.strip().lower() if email else email


def email_is_valid(email):
    """Structural check: one @, non-empty dotted domain, no spaces or forbidden characters."""
    if not email or any(c in email for c in (" ", "\t", "\n")):
        return False
    if email.count("@") != 1:
        return False

    local_part, domain_part = email.split("@", 1)
    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False
    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False
    if "." not in domain_part:
        return False
    if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
        return False
    if ".." in local_part or ".." in domain_part:
        return False
    return not any(c in email for c in _FORBIDDEN_EMAIL_CHARS)


@commerce.aggregate
class User:
    name: String(required=True, min_length=2, max_length=100)
    email: String(required=True, max_length=254)
    registered_at: DateTime()
    is_deleted: Boolean(default=False)
    deleted_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email is not None and not email_is_valid(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @classmethod
    def register(cls, name, email):
        now = datetime.now(UTC)
        user = cls(name=name, email=normalize_email(email), registered_at=now)
        user.raise_(UserRegistered(user_id=user.id, name=user.name, email=user.email, registered_at=now))
        return user

    def update(self, name=_UNSET, email=_UNSET):
        if name is not _UNSET:
            self.name = name
        if email is not _UNSET:
            self.email = normalize_email(email)

        self.raise_(UserUpdated(user_id=self.id, name=self.name, email=self.email))

    def remove(self):
        now = datetime.now(UTC)
        self.is_deleted = True
        self.deleted_at = now
        self.raise_(UserRemoved(user_id=self.id, removed_at=now))
