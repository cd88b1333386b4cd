from flask import current_app

from phonepe_client.providers.phonepe_provider import PhonePeClient
from phonepe_client.providers.transport import HttpTransport

EXTENSION_KEY = 'phonepe'


def get_provider() -> PhonePeClient:
    """
    Get the app's PhonePe client, building it from app config on first use.

    One client (and one requests.Session) is kept per app in app.extensions.

    Returns:
        Initialized client

    Raises:
        ConfigurationError: If merchant credentials are not configured
    """
    client = current_app.extensions.get(EXTENSION_KEY)
    if client is None:
        client = PhonePeClient.from_config(current_app.config)
        current_app.extensions[EXTENSION_KEY] = client
    return client


__all__ = ['get_provider', 'PhonePeClient', 'HttpTransport', 'EXTENSION_KEY']
