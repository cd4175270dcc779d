"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from expirapp.domain import commerce


@commerce.event(part_of="User")
class UserRegistered:
    """A client or seller was registered."""

    __version__ = 1

    user_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    registered_at: DateTime(required=True)


@commerce.event(part_of="User")
class UserUpdated:
    __version__ = 1

    user_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)


@commerce.event(part_of="User")
class UserRemoved:
    __version__ = 1

    user_id: Identifier(required=True)
    removed_at: DateTime(required=True)
