import pytest
from datetime import date
from pydantic import ValidationError

from billtracker.models import BillIn, BillPatch, Category


class TestBillIn:
    def test_name_is_trimmed(self):
        assert BillIn(name="  Rent ").name == "Rent"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            BillIn(name="   ")

    def test_camel_case_input(self):
        bill = BillIn.model_validate({"name": "Rent", "dueDate": "2024-06-01", "amount": "900"})
        assert bill.due_date == date(2024, 6, 1)
        assert bill.amount == 900.0

    def test_null_category_defaults_to_other(self):
        assert BillIn(name="x", category=None).category is Category.OTHER

    def test_unparseable_amount_rejected(self):
        with pytest.raises(ValidationError):
            BillIn(name="x", amount="ten")

    @pytest.mark.parametrize("amount", ["inf", "-inf", "Infinity", 1e999])
    def test_infinite_amount_rejected(self, amount):
        with pytest.raises(ValidationError):
            BillIn(name="x", amount=amount)
        with pytest.raises(ValidationError):
            BillPatch(id=1, amount=amount)


class TestBillPatch:
    def test_changes_are_sparse(self):
        patch = BillPatch.model_validate({"id": 3, "category": "Utilities"})
        assert patch.changes() == {"category": "Utilities"}

    def test_explicit_nulls_are_changes(self):
        patch = BillPatch.model_validate({"id": 3, "dueDate": None, "amount": ""})
        assert patch.changes() == {"due_date": None, "amount": None}

    def test_dates_are_serialized_for_storage(self):
        patch = BillPatch.model_validate({"id": 3, "dueDate": "2024-07-04"})
        assert patch.changes() == {"due_date": "2024-07-04"}

    def test_null_category_resets_to_other(self):
        patch = BillPatch.model_validate({"id": 3, "category": None})
        assert patch.changes() == {"category": "Other"}

    def test_mark_as_paid_is_not_a_field_change(self):
        patch = BillPatch.model_validate({"id": 3, "markAsPaid": True})
        assert patch.mark_as_paid is True
        assert patch.changes() == {}
