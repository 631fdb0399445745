"""Form submission flow: validation before any store call, success, retryable failure."""
import pytest

from acappella.core.forms import DonationForm, FormPhase, FormValidationError, QuotationForm
from acappella.core.page import DONATION_MODAL, QUOTATION_MODAL, PageState
from acappella.core.record_store import StoreError


class RecordingCreate:
    """Stand-in for a collection create call."""

    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def __call__(self, payload):
        self.calls.append(payload)
        if self.fail:
            raise StoreError("service unavailable")
        return "rec-1"


def _fill_quotation(form):
    form.set_field("full_name", "Jane Wanjiku")
    form.set_field("phone", "0712345678")
    form.set_field("email", "jane@example.com")
    form.set_field("event_type", "wedding")
    form.set_field("event_date", "2024-06-01")
    form.set_field("location", "Nairobi")


def test_quotation_with_required_fields_returns_id(store, notifier):
    form = QuotationForm(store.quotations.create, notifier)
    _fill_quotation(form)
    form.set_field("amplification_needed", True)
    record_id = form.submit()
    assert record_id
    assert form.phase is FormPhase.SUCCESS
    [quotation] = store.quotations.list()
    assert quotation.id == record_id
    assert quotation.status == "pending"
    assert quotation.amplification_needed is True
    assert quotation.guest_count is None
    assert notifier.toasts[-1].kind == "success"


def test_missing_full_name_rejected_without_store_call(notifier):
    create = RecordingCreate()
    form = QuotationForm(create, notifier)
    _fill_quotation(form)
    form.set_field("full_name", "  ")
    with pytest.raises(FormValidationError) as exc:
        form.submit()
    assert exc.value.missing == ["full_name"]
    assert create.calls == []
    assert form.phase is FormPhase.EDITING
    assert notifier.toasts[-1].kind == "error"


def test_store_failure_keeps_input_for_retry(notifier):
    create = RecordingCreate(fail=True)
    form = QuotationForm(create, notifier)
    _fill_quotation(form)
    assert form.submit() is None
    assert form.phase is FormPhase.EDITING
    assert form.fields["full_name"] == "Jane Wanjiku"
    assert notifier.toasts[-1].message == "Failed to submit request. Please try again."

    create.fail = False
    assert form.submit() == "rec-1"
    assert len(create.calls) == 2


def test_donation_records_pending_request(store, notifier):
    form = DonationForm(store.donations.create, notifier)
    form.set_field("amount", "1000")
    form.set_field("phone_number", "254712345678")
    record_id = form.submit()
    [donation] = store.donations.list()
    assert donation.id == record_id
    assert donation.amount == 1000
    assert donation.status == "pending"
    assert donation.transaction_id is None


@pytest.mark.parametrize("amount,phone", [("", "254712345678"), ("500", "")])
def test_donation_requires_amount_and_phone(notifier, amount, phone):
    create = RecordingCreate()
    form = DonationForm(create, notifier)
    form.set_field("amount", amount)
    form.set_field("phone_number", phone)
    with pytest.raises(FormValidationError):
        form.submit()
    assert create.calls == []
    assert notifier.toasts[-1].message == "Please fill in all required fields"


@pytest.mark.parametrize("amount", ["abc", "0", "-50"])
def test_donation_rejects_unusable_amount(notifier, amount):
    create = RecordingCreate()
    form = DonationForm(create, notifier)
    form.set_field("amount", amount)
    form.set_field("phone_number", "254712345678")
    with pytest.raises(FormValidationError):
        form.submit()
    assert create.calls == []


def test_donation_presets(notifier):
    form = DonationForm(RecordingCreate(), notifier)
    form.select_preset(2000)
    assert form.fields["amount"] == "2000"
    assert form.selected_preset == 2000
    form.set_field("amount", "750")
    assert form.selected_preset is None
    with pytest.raises(ValueError):
        form.select_preset(750)


def test_submit_ignored_while_submitting(notifier):
    form = None

    def create(payload):
        assert form.submit() is None
        return "rec-1"

    form = DonationForm(create, notifier)
    form.set_field("amount", "500")
    form.set_field("phone_number", "254712345678")
    assert form.submit() == "rec-1"


def test_result_discarded_when_unmounted_in_flight(notifier):
    closed = []
    form = None

    def create(payload):
        form.unmount()
        return "rec-1"

    form = DonationForm(create, notifier, on_close=lambda: closed.append(True))
    form.set_field("amount", "500")
    form.set_field("phone_number", "254712345678")
    assert form.submit() is None
    assert notifier.toasts == []
    assert closed == []


def test_modal_form_success_closes_modal(store):
    page = PageState(store)
    form = page.open_modal(DONATION_MODAL)
    form.select_preset(500)
    form.set_field("phone_number", "254712345678")
    assert form.submit()
    assert page.modals.active is None
    assert page.notifier.toasts[-1].message.startswith("Donation request submitted!")


def test_modal_form_failure_keeps_modal_open(store, monkeypatch):
    page = PageState(store)
    form = page.open_modal(QUOTATION_MODAL)
    _fill_quotation(form)

    def fail(*args, **kwargs):
        raise StoreError("down")

    monkeypatch.setattr(store, "append", fail)
    assert form.submit() is None
    assert page.modals.active == QUOTATION_MODAL
    assert page.modals.content is form
    assert store.quotations.list() == []


def test_inline_donation_form_stays_after_success(store):
    page = PageState(store)
    form = page.donation_section_form()
    form.set_field("amount", "1000")
    form.set_field("phone_number", "254712345678")
    assert form.submit()
    assert form.mounted
    assert form.phase is FormPhase.SUCCESS


@pytest.mark.parametrize("amount", ["inf", "-inf", "nan", "1e309"])
def test_donation_rejects_non_finite_amount(store, notifier, amount):
    form = DonationForm(store.donations.create, notifier)
    form.set_field("amount", amount)
    form.set_field("phone_number", "254712345678")
    with pytest.raises(FormValidationError):
        form.submit()
    assert store.donations.list() == []
    assert notifier.toasts[-1].message == "Please enter a valid amount"


def test_unexpected_create_error_leaves_form_retryable(notifier):
    attempts = []

    def create(payload):
        attempts.append(payload)
        if len(attempts) == 1:
            raise RuntimeError("connection reset")
        return "rec-2"

    form = QuotationForm(create, notifier)
    _fill_quotation(form)
    with pytest.raises(RuntimeError):
        form.submit()
    assert form.phase is FormPhase.EDITING
    assert form.fields["full_name"] == "Jane Wanjiku"
    assert form.submit() == "rec-2"


def test_quotation_optional_values_sent_as_text(store, notifier):
    form = QuotationForm(store.quotations.create, notifier)
    _fill_quotation(form)
    form.set_field("guest_count", 150)
    form.set_field("specific_songs", {"The Rock"})
    assert form.submit()
    [quotation] = store.quotations.list()
    assert quotation.guest_count == "150"
    assert quotation.specific_songs == "{'The Rock'}"
    assert form.phase is FormPhase.SUCCESS
