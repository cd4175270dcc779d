"""User registration and maintenance: commands and handler.

An e-mail address belongs to at most one live user.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from expirapp.domain import commerce
from expirapp.identity.user.user import User
from expirapp.shared.errors import DuplicateEmailError

logger = structlog.get_logger(__name__)


@commerce.command(part_of="User")
class RegisterUser:
    """Register a user under an e-mail address no live user holds."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)


@commerce.command(part_of="User")
class UpdateUser:
    """Change a user's name or e-mail; omitted fields stay as they are."""

    user_id: Identifier(required=True)
    name: String(max_length=100)
    email: String(max_length=254)


@commerce.command(part_of="User")
class RemoveUser:
    """Soft-delete a user, freeing the e-mail address."""

    user_id: Identifier(required=True)


def _ensure_email_free(repo, email, user_id=None):
    existing = repo.find_by_email(email)
    if existing is not None and str(existing.id) != str(user_id):
        raise DuplicateEmailError({"email": ["This email address is already registered"]})


@commerce.command_handler(part_of=User)
class ManageUsersHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        _ensure_email_free(repo, command.email)

        user = User.register(name=command.name, email=command.email)
        repo.add(user)

        logger.info("User registered", user_id=str(user.id))
        return str(user.id)

    @handle(UpdateUser)
    def update_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get_live(command.user_id)

        kwargs = {}
        if command.name is not None:
            kwargs["name"] = command.name
        if command.email is not None:
            _ensure_email_free(repo, command.email, user_id=user.id)
            kwargs["email"] = command.email

        user.update(**kwargs)
        repo.add(user)

    @handle(RemoveUser)
    def remove_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get_live(command.user_id)
        user.remove()
        repo.add(user)
