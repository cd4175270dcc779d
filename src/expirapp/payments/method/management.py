"""Payment method registry: commands and handler.

Names are unique across all methods. Methods are hard-deleted, and only
while no live payment refers to them.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from expirapp.domain import commerce
from expirapp.payments.method.method import PaymentMethod
from expirapp.payments.payment.payment import Payment
from expirapp.shared.errors import DuplicatePaymentMethodError

logger = structlog.get_logger(__name__)


@commerce.command(part_of="PaymentMethod")
class CreatePaymentMethod:
    """Register a payment method under a unique name."""

    name = String(required=True, max_length=50)


@commerce.command(part_of="PaymentMethod")
class RenamePaymentMethod:
    """Rename a payment method to a name no other method uses."""

    method_id = Identifier(required=True)
    name = String(required=True, max_length=50)


@commerce.command(part_of="PaymentMethod")
class DeletePaymentMethod:
    """Delete a payment method that no live payment refers to."""

    method_id = Identifier(required=True)


def _ensure_name_free(repo, name, method_id=None):
    existing = repo.find_by_name(name)
    if existing is not None and str(existing.id) != str(method_id):
        raise DuplicatePaymentMethodError({"name": [f"A payment method named '{name}' already exists"]})


@commerce.command_handler(part_of=PaymentMethod)
class ManagePaymentMethodsHandler:
    @handle(CreatePaymentMethod)
    def create_method(self, command):
        repo = current_domain.repository_for(PaymentMethod)
        _ensure_name_free(repo, command.name)

        method = PaymentMethod(name=command.name)
        repo.add(method)
        return str(method.id)

    @handle(RenamePaymentMethod)
    def rename_method(self, command):
        repo = current_domain.repository_for(PaymentMethod)
        method = repo.get(command.method_id)
        _ensure_name_free(repo, command.name, method_id=method.id)

        method.rename(command.name)
        repo.add(method)

    @handle(DeletePaymentMethod)
    def delete_method(self, command):
        repo = current_domain.repository_for(PaymentMethod)
        method = repo.get(command.method_id)

        in_use = current_domain.repository_for(Payment).count_for_method(method.id)
        if in_use:
            raise ValidationError({"method_id": [f"Payment method is used by {in_use} payment(s)"]})

        repo.remove(method)
        logger.info("Payment method deleted", method_id=str(method.id), name=method.name)
