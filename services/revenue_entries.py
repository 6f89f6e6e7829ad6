"""
Payload validation for revenue entries.

Cleans the JSON bodies posted to the revenue endpoints into column values.
Raises ValueError with a user-facing message on bad input; routes turn that
into a 400.
"""

import re
from datetime import date
from decimal import Decimal, InvalidOperation

from services.commission import resolve_commission_amount
from services.money import ZERO, money
from services.status import check_transition

# Numeric(12,2) and Numeric(5,2) column limits
MAX_AMOUNT = Decimal("1e10")
MAX_RATE = Decimal("1000")

INVESTMENT_ENTRY_TYPES = ["dividend", "new_aum"]

ACCOUNT_TYPES = [
    "Cash",
    "TFSA",
    "RRSP",
    "FHSA",
    "LIRA",
    "LIF",
    "RIF",
    "Corporate Cash",
    "IPP",
    "Joint Cash",
    "RESP",
    "Other",
]


def _parse_date(value) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except (TypeError, ValueError):
        raise ValueError(f"Date must be in YYYY-MM-DD format (got {value!r})") from None


def _required_text(data: dict, key: str, label: str, max_length: int) -> str:
    value = str(data.get(key) or "").strip()
    if not value:
        raise ValueError(f"{label} is required")
    if len(value) > max_length:
        raise ValueError(f"{label} must be {max_length} characters or less")
    return value


def _optional_text(data: dict, key: str, label: str, max_length: int):
    value = data.get(key)
    if value is None:
        return None
    value = str(value).strip()
    if len(value) > max_length:
        raise ValueError(f"{label} must be {max_length} characters or less")
    return value or None


def _amount(data: dict, key: str, label: str, allow_zero: bool = True, limit=MAX_AMOUNT):
    raw = data.get(key)
    text = re.sub(r"[$,\s]", "", str(raw)) if raw is not None else ""
    try:
        amount = Decimal(text) if text else ZERO
    except InvalidOperation:
        raise ValueError(f"{label} must be a number") from None
    if not amount.is_finite():
        raise ValueError(f"{label} must be a number")
    if amount < 0 or (amount == 0 and not allow_zero):
        raise ValueError(f"{label} must be a positive number")
    if amount >= limit:
        raise ValueError(f"{label} is too large")
    return money(amount)


def _status(data: dict, existing, strict_status: bool) -> str:
    """New entries default to pending; an update must name a status."""
    status = data.get("status")
    if existing is None:
        return check_transition(None, status or "pending", strict_status).value
    if status in (None, ""):
        raise ValueError("Status is required")
    return check_transition(existing.status, status, strict_status).value


def clean_insurance_payload(data: dict, existing=None, strict_status: bool = False) -> dict:
    """
    Validate an insurance revenue payload.

    With ``existing`` set this is a partial update: only keys present in
    ``data`` are validated and returned, but commission is re-resolved
    whenever the premium or policy type changes.
    """
    partial = existing is not None
    cleaned = {}

    if not partial or "date" in data:
        cleaned["date"] = _parse_date(data.get("date"))
    if not partial or "client_name" in data:
        cleaned["client_name"] = _required_text(data, "client_name", "Client name", 200)
    if not partial or "policy_type" in data:
        cleaned["policy_type"] = _required_text(data, "policy_type", "Policy type", 50)
    if "carrier" in data:
        cleaned["carrier"] = _optional_text(data, "carrier", "Carrier", 200)
    if "policy_number" in data:
        cleaned["policy_number"] = _optional_text(data, "policy_number", "Policy number", 100)
    if "notes" in data:
        cleaned["notes"] = _optional_text(data, "notes", "Notes", 1000)
    if not partial or "premium" in data:
        cleaned["premium"] = _amount(data, "premium", "Premium")
    if "commission_rate" in data:
        rate = data.get("commission_rate")
        cleaned["commission_rate"] = (
            _amount(data, "commission_rate", "Commission rate", limit=MAX_RATE) if rate not in (None, "") else None
        )
    if not partial or "status" in data:
        cleaned["status"] = _status(data, existing, strict_status)

    touches_commission = any(
        k in data for k in ("premium", "policy_type", "commission_amount")
    )
    if not partial or touches_commission:
        policy_type = cleaned.get("policy_type", getattr(existing, "policy_type", None))
        premium = cleaned.get("premium", getattr(existing, "premium", None))
        if "commission_amount" in data:
            entered = _amount(data, "commission_amount", "Commission amount")
        else:
            entered = getattr(existing, "commission_amount", None)
        cleaned["commission_amount"] = money(
            resolve_commission_amount(policy_type, premium, entered)
        )

    return cleaned


def clean_investment_payload(data: dict, existing=None, strict_status: bool = False) -> dict:
    """Validate an investment revenue payload (partial when ``existing`` is set)."""
    partial = existing is not None
    cleaned = {}

    if not partial or "date" in data:
        cleaned["date"] = _parse_date(data.get("date"))
    if not partial or "entry_type" in data:
        entry_type = data.get("entry_type")
        if entry_type not in INVESTMENT_ENTRY_TYPES:
            raise ValueError("Entry type must be 'dividend' or 'new_aum'")
        cleaned["entry_type"] = entry_type
    if not partial or "amount" in data:
        cleaned["amount"] = _amount(data, "amount", "Amount", allow_zero=False)
    if not partial or "source_name" in data:
        cleaned["source_name"] = _required_text(data, "source_name", "Source name", 200)
    if "account_type" in data:
        cleaned["account_type"] = _optional_text(data, "account_type", "Account type", 50)
    if "description" in data:
        cleaned["description"] = _optional_text(data, "description", "Description", 500)
    if "notes" in data:
        cleaned["notes"] = _optional_text(data, "notes", "Notes", 1000)
    if not partial or "status" in data:
        cleaned["status"] = _status(data, existing, strict_status)

    return cleaned
