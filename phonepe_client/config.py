import os
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv()

SANDBOX_HOST_URL = 'https://api-preprod.phonepe.com/apis/pg-sandbox'
PRODUCTION_HOST_URL = 'https://api.phonepe.com/apis/hermes'

# Fallbacks for optional merchant/request fields. Everything that has a
# default is listed here and nowhere else.
DEFAULTS: Dict[str, Any] = {
    'key_index': '1',
    'redirect_mode': 'REDIRECT',
    'timeout': 30,
}


def apply_defaults(values: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fill unset entries of ``values`` from DEFAULTS

    Args:
        values: Field values; None or empty string count as unset

    Returns:
        New dict with defaults applied
    """
    resolved = dict(values)
    for field, default in DEFAULTS.items():
        if field in resolved and resolved[field] in (None, ''):
            resolved[field] = default
    return resolved


class Config:
    """Base configuration"""
    LOG_DIR = os.getenv('LOG_DIR', 'logs')

    # PhonePe merchant configuration
    PHONEPE_MERCHANT_ID = os.getenv('PHONEPE_MERCHANT_ID')
    PHONEPE_MERCHANT_USER_ID = os.getenv('PHONEPE_MERCHANT_USER_ID')
    PHONEPE_SECRET_KEY = os.getenv('PHONEPE_SECRET_KEY')
    PHONEPE_KEY_INDEX = os.getenv('PHONEPE_KEY_INDEX')
    PHONEPE_HOST_URL = os.getenv('PHONEPE_HOST_URL', SANDBOX_HOST_URL)
    PHONEPE_CALLBACK_URL = os.getenv('PHONEPE_CALLBACK_URL')
    PHONEPE_TIMEOUT = int(os.getenv('PHONEPE_TIMEOUT', DEFAULTS['timeout']))


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    PHONEPE_HOST_URL = os.getenv('PHONEPE_HOST_URL', PRODUCTION_HOST_URL)


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    PHONEPE_MERCHANT_ID = 'PGTESTPAYUAT'
    PHONEPE_MERCHANT_USER_ID = 'MUID123'
    PHONEPE_SECRET_KEY = 'test-secret-key'
    PHONEPE_KEY_INDEX = '1'
    PHONEPE_HOST_URL = 'https://phonepe.test'
    PHONEPE_CALLBACK_URL = 'https://merchant.test/phonepe/callback'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
