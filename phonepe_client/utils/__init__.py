"""
Utils Package
Utility functions and helpers
"""

from phonepe_client.utils.keygen import generate_transaction_id
from phonepe_client.utils.logger import get_logger, RequestLogger
from phonepe_client.utils.signing import encode_payload, decode_payload, compute_signature
from phonepe_client.utils.validators import (
    validate_phone_number,
    validate_amount,
    validate_transaction_id,
    to_minor_units
)

__all__ = [
    'generate_transaction_id',
    'get_logger',
    'RequestLogger',
    'encode_payload',
    'decode_payload',
    'compute_signature',
    'validate_phone_number',
    'validate_amount',
    'validate_transaction_id',
    'to_minor_units'
]
