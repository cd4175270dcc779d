import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from expirapp.payments.method.management import CreatePaymentMethod, DeletePaymentMethod, RenamePaymentMethod
from expirapp.payments.method.method import PaymentMethod
from expirapp.payments.payment.recording import RecordPayment, VoidPayment
from expirapp.shared.errors import DuplicatePaymentMethodError


def _create(name):
    return current_domain.process(CreatePaymentMethod(name=name), asynchronous=False)


class TestCreatePaymentMethod:
    def test_create(self):
        method_id = _create("Cash")
        assert current_domain.repository_for(PaymentMethod).get(method_id).name == "Cash"

    def test_duplicate_name(self):
        _create("Cash")
        with pytest.raises(DuplicatePaymentMethodError):
            _create("Cash")


class TestRenamePaymentMethod:
    def test_rename(self):
        method_id = _create("Cash")
        current_domain.process(RenamePaymentMethod(method_id=method_id, name="Cash (EUR)"), asynchronous=False)
        assert current_domain.repository_for(PaymentMethod).get(method_id).name == "Cash (EUR)"

    def test_renaming_to_own_name_is_allowed(self):
        method_id = _create("Cash")
        current_domain.process(RenamePaymentMethod(method_id=method_id, name="Cash"), asynchronous=False)

    def test_renaming_to_taken_name(self):
        _create("Cash")
        card = _create("Card")
        with pytest.raises(DuplicatePaymentMethodError):
            current_domain.process(RenamePaymentMethod(method_id=card, name="Cash"), asynchronous=False)


class TestDeletePaymentMethod:
    def test_delete_unused(self):
        method_id = _create("Voucher")
        current_domain.process(DeletePaymentMethod(method_id=method_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(PaymentMethod).get(method_id)

    def test_method_in_use_is_kept(self, add_product, place_order):
        method_id = _create("Card")
        order_id = place_order([(add_product(price=5.0), 1)])
        payment_id = current_domain.process(
            RecordPayment(order_id=order_id, amount=5.0, method_id=method_id),
            asynchronous=False,
        )

        with pytest.raises(ValidationError):
            current_domain.process(DeletePaymentMethod(method_id=method_id), asynchronous=False)

        current_domain.process(VoidPayment(payment_id=payment_id), asynchronous=False)
        current_domain.process(DeletePaymentMethod(method_id=method_id), asynchronous=False)

    def test_list_is_sorted_by_name(self):
        _create("Transfer")
        _create("Cash")
        names = [m.name for m in current_domain.repository_for(PaymentMethod).list_all()]
        assert names == ["Cash", "Transfer"]
