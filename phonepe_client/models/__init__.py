from phonepe_client.models.merchant import MerchantContext
from phonepe_client.models.transaction import GatewayRequest, PAYMENT_INSTRUMENT_TYPES, REDIRECT_MODES

__all__ = ['MerchantContext', 'GatewayRequest', 'PAYMENT_INSTRUMENT_TYPES', 'REDIRECT_MODES']
