"""
PhonePe Payment Gateway Client (Standard Checkout, PG API v1)

Authentication: X-VERIFY header, sha256(payload + path + salt key) + "###" + salt index

Endpoints:
  - Pay:    POST /pg/v1/pay                                  body {"request": <base64 payload>}
  - Status: GET  /pg/v1/status/{merchantId}/{merchantTransactionId}

Responses are returned exactly as PhonePe sends them.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from phonepe_client.config import apply_defaults
from phonepe_client.errors import ConfigurationError, ValidationError
from phonepe_client.models import GatewayRequest, MerchantContext
from phonepe_client.providers.transport import HttpTransport
from phonepe_client.utils.keygen import generate_transaction_id
from phonepe_client.utils.signing import compute_signature, encode_payload
from phonepe_client.utils.validators import (
    first_missing,
    is_missing,
    to_minor_units,
    validate_amount,
    validate_transaction_id,
)

logger = logging.getLogger(__name__)


class PhonePeClient:
    """
    Builds, signs and sends PhonePe payment requests.

    The client holds only the immutable MerchantContext and its collaborators,
    so one instance can serve concurrent calls. Transaction ids are resolved
    per call: pass ``transaction_id`` to choose one, otherwise a fresh one is
    generated and can be read back from ``build_payment_request``.
    """

    PAY_ENDPOINT = "/pg/v1/pay"
    STATUS_ENDPOINT = "/pg/v1/status/{merchant_id}/{transaction_id}"

    # Merchant fields checked before any request is built, in this order
    _MERCHANT_FIELDS = ("merchant_id", "merchant_user_id", "secret_key", "host_url")

    def __init__(
            self,
            merchant_id: str,
            merchant_user_id: str,
            secret_key: str,
            key_index=None,
            host_url: Optional[str] = None,
            callback_url: Optional[str] = None,
            timeout: Optional[int] = None,
            transport: Optional[HttpTransport] = None,
            id_generator: Optional[Callable[[], str]] = None,
    ):
        self.merchant = MerchantContext.create(
            merchant_id=merchant_id,
            merchant_user_id=merchant_user_id,
            secret_key=secret_key,
            key_index=key_index,
            host_url=host_url,
            callback_url=callback_url,
            timeout=timeout,
        )
        self.transport = transport or HttpTransport(timeout=self.merchant.timeout)
        self.id_generator = id_generator or generate_transaction_id

    @classmethod
    def from_config(cls, config: Mapping[str, Any], **kwargs) -> 'PhonePeClient':
        """
        Build a client from PHONEPE_* settings (e.g. Flask app.config).

        Raises:
            ConfigurationError: If a credential setting is absent
        """
        missing = first_missing(
            (key, config.get(key))
            for key in ('PHONEPE_MERCHANT_ID', 'PHONEPE_MERCHANT_USER_ID', 'PHONEPE_SECRET_KEY')
        )
        if missing:
            raise ConfigurationError(f"{missing} is not configured")

        return cls(
            merchant_id=config['PHONEPE_MERCHANT_ID'],
            merchant_user_id=config['PHONEPE_MERCHANT_USER_ID'],
            secret_key=config['PHONEPE_SECRET_KEY'],
            key_index=config.get('PHONEPE_KEY_INDEX'),
            host_url=config.get('PHONEPE_HOST_URL'),
            callback_url=config.get('PHONEPE_CALLBACK_URL'),
            timeout=config.get('PHONEPE_TIMEOUT'),
            **kwargs
        )

    # Public operations

    def initiate_payment(self, data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Start a payment on PhonePe.

        data fields:
            amount                  – required, rupees (sent to PhonePe in paise)
            callback_url            – required unless set on the merchant context
            redirect_url            – required
            payment_instrument_type – required, e.g. "PAY_PAGE"
            mobile_number           – optional
            redirect_mode           – optional, "REDIRECT" (default) or "POST"
            transaction_id          – optional, generated when absent

        Returns:
            PhonePe's response body, unchanged

        Raises:
            ValidationError: On missing or invalid input; nothing is sent
            GatewayError: If PhonePe or the network reports a failure
        """
        request = self.build_payment_request(data)
        return self.send(request)

    def get_transaction_status(self, data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Fetch the status of a transaction.

        data fields:
            transaction_id – required, the merchantTransactionId used at initiation

        Returns:
            PhonePe's response body, unchanged
        """
        request = self.build_status_request(data)
        return self.send(request)

    # Request assembly

    def build_payment_request(self, data: Optional[Mapping[str, Any]]) -> GatewayRequest:
        """Validate ``data`` and assemble the signed pay request without sending it."""
        if not data:
            raise ValidationError("Transaction data cannot be empty")

        callback_url = data.get("callback_url") or self.merchant.callback_url

        if is_missing(data.get("amount")):
            raise ValidationError("amount is required")
        valid, error = validate_amount(data["amount"])
        if not valid:
            raise ValidationError(error)

        missing = first_missing((
            ("callback_url", callback_url),
            ("redirect_url", data.get("redirect_url")),
            ("payment_instrument_type", data.get("payment_instrument_type")),
        ))
        if missing:
            raise ValidationError(f"{missing} is required")

        self._validate_merchant()

        transaction_id = data.get("transaction_id")
        if transaction_id:
            self._validate_transaction_id(transaction_id)
        else:
            transaction_id = self.id_generator()
        options = apply_defaults({"redirect_mode": data.get("redirect_mode")})

        payload = {
            "merchantId": self.merchant.merchant_id,
            "merchantUserId": self.merchant.merchant_user_id,
            "callbackUrl": callback_url,
            "amount": to_minor_units(data["amount"]),
            "mobileNumber": data.get("mobile_number") or None,
            "merchantTransactionId": transaction_id,
            "redirectUrl": data["redirect_url"],
            "redirectMode": options["redirect_mode"],
            "paymentInstrument": {
                "type": data["payment_instrument_type"],
            },
        }
        encoded = encode_payload(payload)
        logger.debug("PhonePe pay payload for %s: %s", transaction_id, payload)

        return GatewayRequest(
            method="POST",
            url=self.merchant.host_url + self.PAY_ENDPOINT,
            headers={
                "Content-Type": "application/json",
                "X-VERIFY": self.sign(encoded, self.PAY_ENDPOINT),
            },
            body={"request": encoded},
            transaction_id=transaction_id,
            payload=payload,
        )

    def build_status_request(self, data: Optional[Mapping[str, Any]]) -> GatewayRequest:
        """Validate ``data`` and assemble the signed status request without sending it."""
        if not data:
            raise ValidationError("Transaction data cannot be empty")
        if is_missing(data.get("transaction_id")):
            raise ValidationError("transaction_id is required")

        self._validate_merchant()

        transaction_id = data["transaction_id"]
        # Goes into the signed path verbatim
        self._validate_transaction_id(transaction_id)
        endpoint = self.STATUS_ENDPOINT.format(
            merchant_id=self.merchant.merchant_id,
            transaction_id=transaction_id,
        )

        return GatewayRequest(
            method="GET",
            url=self.merchant.host_url + endpoint,
            headers={
                "Content-Type": "application/json",
                "X-VERIFY": self.sign("", endpoint),
                "X-MERCHANT-ID": self.merchant.merchant_id,
            },
            body=None,
            transaction_id=transaction_id,
        )

    def sign(self, encoded_payload: str, endpoint: str) -> str:
        """X-VERIFY value for ``encoded_payload`` sent to ``endpoint``."""
        return compute_signature(
            encoded_payload,
            endpoint,
            self.merchant.secret_key,
            self.merchant.key_index,
        )

    # Private helpers

    def _validate_merchant(self):
        missing = first_missing(
            (name, getattr(self.merchant, name)) for name in self._MERCHANT_FIELDS
        )
        if missing:
            raise ValidationError(f"{missing} is required")

    def _validate_transaction_id(self, transaction_id):
        valid, error = validate_transaction_id(str(transaction_id))
        if not valid:
            raise ValidationError(error)

    def send(self, request: GatewayRequest) -> Dict[str, Any]:
        """Send an assembled request; returns the response body unchanged."""
        logger.info("PhonePe %s %s (transaction %s)", request.method, request.url, request.transaction_id)
        return self.transport.send(request)
