"""
Custom Validators
Validation functions for PhonePe request fields
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional, Tuple

# merchantTransactionId: at most 38 characters, alphanumerics, '_' and '-'
TRANSACTION_ID_PATTERN = re.compile(r'^[A-Za-z0-9_-]{1,38}$')


def is_missing(value) -> bool:
    """True for None and empty strings/collections; 0 is not missing."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, dict, list, tuple)):
        return len(value) == 0
    return False


def first_missing(fields: Iterable[Tuple[str, object]]) -> Optional[str]:
    """
    Find the first unset field

    Args:
        fields: (name, value) pairs in the order they must be checked

    Returns:
        Name of the first missing field, or None
    """
    for name, value in fields:
        if is_missing(value):
            return name
    return None


def _as_decimal(amount) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidOperation(f"Amount must be a number, got {type(amount).__name__}")
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, str):
        return Decimal(amount.strip())
    if isinstance(amount, (int, float)):
        return Decimal(str(amount))
    raise InvalidOperation(f"Amount must be a number, got {type(amount).__name__}")


def validate_amount(amount) -> tuple[bool, Optional[str]]:
    """
    Validate payment amount in major currency units (rupees)

    Args:
        amount: Amount to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        amount_decimal = _as_decimal(amount)

        if not amount_decimal.is_finite():
            return False, "Amount must be a finite number"

        if amount_decimal <= 0:
            return False, "Amount must be greater than 0"

        # Paise is the smallest unit
        if amount_decimal.as_tuple().exponent < -2:
            return False, "Amount can have at most 2 decimal places"

        return True, None

    except (InvalidOperation, ValueError) as e:
        return False, f"Invalid amount format: {str(e)}"


def to_minor_units(amount) -> int:
    """Convert an amount in rupees to paise. Call validate_amount first."""
    paise = _as_decimal(amount) * 100
    return int(paise.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def validate_phone_number(phone: str) -> tuple[bool, Optional[str]]:
    """
    Validate an Indian mobile number

    Accepts 10 digits starting with 6-9, optionally prefixed with +91 or 91.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not phone:
        return False, "Phone number is required"

    phone_clean = re.sub(r'[\s\-\(\)]', '', phone)

    if not re.match(r'^\+?\d+$', phone_clean):
        return False, "Phone number must contain only digits and optional leading +"

    phone_digits = phone_clean.lstrip('+')
    if len(phone_digits) == 12 and phone_digits.startswith('91'):
        phone_digits = phone_digits[2:]

    if len(phone_digits) != 10:
        return False, "Mobile number should be 10 digits"

    if phone_digits[0] not in '6789':
        return False, "Mobile number should start with 6, 7, 8 or 9"

    return True, None


def sanitize_phone_number(phone: str) -> str:
    """Reduce a valid mobile number to its 10 local digits."""
    digits = re.sub(r'\D', '', phone)
    if len(digits) == 12 and digits.startswith('91'):
        digits = digits[2:]
    return digits


def validate_transaction_id(transaction_id: str) -> tuple[bool, Optional[str]]:
    """
    Validate a merchant transaction id

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not transaction_id:
        return False, "Transaction id is required"

    if not TRANSACTION_ID_PATTERN.fullmatch(transaction_id):
        return False, (
            "Transaction id must be at most 38 characters and contain only "
            "alphanumeric characters, hyphens, and underscores"
        )

    return True, None
