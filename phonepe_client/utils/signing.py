"""
Request signing for the PhonePe API

PhonePe authenticates each call with an X-VERIFY header:

    sha256(base64_payload + endpoint_path + secret_key) + "###" + key_index

For GET requests there is no payload and the empty string is hashed in its
place.
"""

import base64
import hashlib
import json
from typing import Any, Dict

SIGNATURE_DELIMITER = '###'


def encode_payload(payload: Dict[str, Any]) -> str:
    """Serialise ``payload`` to compact JSON (key order preserved) and base64 it."""
    raw = json.dumps(payload, separators=(',', ':'))
    return base64.b64encode(raw.encode('utf-8')).decode('ascii')


def decode_payload(encoded: str) -> Dict[str, Any]:
    """Inverse of encode_payload."""
    return json.loads(base64.b64decode(encoded).decode('utf-8'))


def compute_signature(encoded_payload: str, endpoint: str, secret_key: str, key_index) -> str:
    """
    Compute the X-VERIFY header value

    Args:
        encoded_payload: Base64 payload, or '' for requests without a body
        endpoint: Endpoint path, e.g. '/pg/v1/pay'
        secret_key: Merchant salt key
        key_index: Salt key index

    Returns:
        '<64 hex chars>###<key_index>'
    """
    digest = hashlib.sha256(
        (encoded_payload + endpoint + secret_key).encode('utf-8')
    ).hexdigest()
    return f'{digest}{SIGNATURE_DELIMITER}{key_index}'
