"""Quotation and donation forms: editing -> submitting -> success | failure."""
import logging
import math
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from acappella.config import DONATION_PRESET_AMOUNTS
from acappella.core.notifications import Notifier
from acappella.core.record_store import StoreError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"


class FormPhase(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


class FormValidationError(ValueError):
    """Required fields missing or unusable; nothing was sent to the store."""

    def __init__(self, missing: List[str], message: str = REQUIRED_FIELDS_MESSAGE) -> None:
        super().__init__(f"{message}: {', '.join(missing)}")
        self.missing = missing
        self.message = message


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class _Form:
    """Locally buffered fields submitted through a create callable."""

    required: Tuple[str, ...] = ()
    success_message = ""
    failure_message = ""

    def __init__(
        self,
        create: Callable[[Dict[str, Any]], str],
        notifier: Notifier,
        on_close: Optional[Callable[[], None]] = None,
    ) -> None:
        self._create = create
        self._notifier = notifier
        self._on_close = on_close
        self.phase = FormPhase.EDITING
        self.mounted = True
        self.fields: Dict[str, Any] = self.initial_fields()
        self.last_id: Optional[str] = None

    def initial_fields(self) -> Dict[str, Any]:
        raise NotImplementedError

    def payload(self) -> Dict[str, Any]:
        raise NotImplementedError

    @property
    def is_submitting(self) -> bool:
        return self.phase is FormPhase.SUBMITTING

    def set_field(self, name: str, value: Any) -> None:
        if name not in self.fields:
            raise KeyError(name)
        self.fields[name] = value

    def missing_fields(self) -> List[str]:
        return [name for name in self.required if _blank(self.fields.get(name))]

    def _reject(self, missing: List[str], message: str = REQUIRED_FIELDS_MESSAGE) -> None:
        self._notifier.error(message)
        raise FormValidationError(missing, message)

    def unmount(self) -> None:
        """Form left the page; any in-flight result is discarded."""
        self.mounted = False

    def submit(self) -> Optional[str]:
        """Validate and create the record.

        Returns the new id on success. Returns None when the submit is
        ignored (already submitting), when the store call failed (input is
        kept for retry), or when the form was unmounted meanwhile.
        Raises FormValidationError before any store call on missing fields.
        """
        if self.is_submitting:
            logger.debug("%s: submit ignored, already submitting", type(self).__name__)
            return None
        missing = self.missing_fields()
        if missing:
            self._reject(missing)
        payload = self.payload()

        self.phase = FormPhase.SUBMITTING
        try:
            record_id = self._create(payload)
        except StoreError as e:
            logger.warning("%s: create failed: %s", type(self).__name__, e)
            if not self.mounted:
                return None
            self.phase = FormPhase.FAILURE
            self._notifier.error(self.failure_message)
            self.phase = FormPhase.EDITING
            return None
        finally:
            # Any other error propagates, but the form must stay submittable
            if self.phase is FormPhase.SUBMITTING:
                self.phase = FormPhase.EDITING

        if not self.mounted:
            logger.debug("%s: result discarded after unmount", type(self).__name__)
            return None
        self.phase = FormPhase.SUCCESS
        self.last_id = record_id
        self._notifier.success(self.success_message)
        if self._on_close is not None:
            self._on_close()
        return record_id


class QuotationForm(_Form):
    """Booking request form."""

    required = ("full_name", "phone", "email", "event_type", "event_date", "location")
    optional = ("guest_count", "duration", "specific_songs", "special_requests")
    success_message = "Quotation request submitted successfully! We'll contact you within 24 hours."
    failure_message = "Failed to submit request. Please try again."

    def initial_fields(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {name: "" for name in self.required + self.optional}
        data["amplification_needed"] = False
        return data

    def payload(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {name: str(self.fields[name]).strip() for name in self.required}
        for name in self.optional:
            value = self.fields[name]
            out[name] = None if _blank(value) else str(value).strip()
        out["amplification_needed"] = bool(self.fields["amplification_needed"])
        return out


class DonationForm(_Form):
    """M-Pesa donation form; presets fill the amount, typing clears the preset."""

    required = ("amount", "phone_number")
    success_message = "Donation request submitted! You will receive an M-Pesa prompt shortly."
    failure_message = "Failed to process donation. Please try again."
    preset_amounts = DONATION_PRESET_AMOUNTS

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.selected_preset: Optional[int] = None

    def initial_fields(self) -> Dict[str, Any]:
        return {"amount": "", "phone_number": ""}

    def select_preset(self, amount: Optional[int]) -> None:
        if amount is not None and amount not in self.preset_amounts:
            raise ValueError(f"Not a preset amount: {amount}")
        self.selected_preset = amount
        if amount is not None:
            self.fields["amount"] = str(amount)

    def set_field(self, name: str, value: Any) -> None:
        super().set_field(name, value)
        if name == "amount":
            self.selected_preset = None

    def payload(self) -> Dict[str, Any]:
        try:
            amount = float(self.fields["amount"])
        except (TypeError, ValueError):
            self._reject(["amount"], "Please enter a valid amount")
        if not math.isfinite(amount) or amount <= 0:
            self._reject(["amount"], "Please enter a valid amount")
        return {"amount": amount, "phone_number": str(self.fields["phone_number"]).strip()}
