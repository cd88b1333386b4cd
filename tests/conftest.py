"""
Pytest Configuration and Fixtures
"""
from unittest.mock import Mock

import pytest

from phonepe_client import create_app
from phonepe_client.providers import HttpTransport, PhonePeClient


@pytest.fixture(scope='session')
def app():
    """Create application for testing"""
    app = create_app('testing')

    # Establish application context
    ctx = app.app_context()
    ctx.push()

    yield app

    ctx.pop()


@pytest.fixture(scope='function')
def client(app):
    """Create a test client"""
    return app.test_client()


@pytest.fixture
def merchant_config():
    return {
        'merchant_id': 'M1',
        'merchant_user_id': 'U1',
        'secret_key': 'K1',
        'host_url': 'https://host',
    }


@pytest.fixture
def transport():
    """Transport double; set .send.return_value / .side_effect per test."""
    return Mock(spec=HttpTransport)


@pytest.fixture
def phonepe(merchant_config, transport):
    """Client with a mocked transport"""
    return PhonePeClient(**merchant_config, transport=transport)


@pytest.fixture
def payment_data():
    return {
        'amount': 100,
        'callback_url': 'https://cb',
        'redirect_url': 'https://rd',
        'payment_instrument_type': 'PAY_PAGE',
    }
