from dataclasses import dataclass, field
from typing import Any, Dict, Optional


# Payment instrument types accepted by the PhonePe Standard Checkout API
PAYMENT_INSTRUMENT_TYPES = (
    'PAY_PAGE',
    'UPI_INTENT',
    'UPI_COLLECT',
    'UPI_QR',
    'CARD',
    'SAVED_CARD',
    'TOKEN',
    'NET_BANKING',
)

REDIRECT_MODES = ('REDIRECT', 'POST')


@dataclass
class GatewayRequest:
    """
    Fully assembled outbound request to the PhonePe API.

    Attributes:
        method: HTTP method
        url: Absolute URL
        headers: Request headers, including X-VERIFY
        body: JSON body, or None for GET requests
        transaction_id: Merchant transaction id the request refers to
        payload: Decoded payload that was signed (None for status checks)
    """
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[Dict[str, Any]] = None
    transaction_id: Optional[str] = None
    payload: Optional[Dict[str, Any]] = field(default=None, repr=False)
