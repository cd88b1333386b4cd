from dataclasses import dataclass, field
from typing import Optional

from phonepe_client.config import apply_defaults


@dataclass(frozen=True)
class MerchantContext:
    """
    Credentials and settings identifying the merchant to PhonePe.

    Fields are checked for presence when a request is built, not here, so a
    context can be created from partial configuration.
    """
    merchant_id: str
    merchant_user_id: str
    secret_key: str = field(repr=False)
    key_index: str = '1'
    host_url: Optional[str] = None
    callback_url: Optional[str] = None
    timeout: int = 30

    @classmethod
    def create(
            cls,
            merchant_id: str,
            merchant_user_id: str,
            secret_key: str,
            key_index=None,
            host_url: Optional[str] = None,
            callback_url: Optional[str] = None,
            timeout: Optional[int] = None,
    ) -> 'MerchantContext':
        """Build a context, resolving optional fields against config.DEFAULTS."""
        values = apply_defaults({'key_index': key_index, 'timeout': timeout})
        return cls(
            merchant_id=merchant_id,
            merchant_user_id=merchant_user_id,
            secret_key=secret_key,
            key_index=str(values['key_index']),
            host_url=host_url.rstrip('/') if host_url else host_url,
            callback_url=callback_url,
            timeout=int(values['timeout']),
        )
