"""
Integration Tests for the payments API

HttpTransport.send is patched at class level so requests are built and signed
for real from TestingConfig but nothing leaves the process.
"""

import logging
from unittest.mock import patch

import pytest

from phonepe_client.errors import GatewayError
from phonepe_client.providers import EXTENSION_KEY, HttpTransport, get_provider
from phonepe_client.utils.signing import decode_payload

PAY_PAGE_RESPONSE = {
    "success": True,
    "code": "PAYMENT_INITIATED",
    "message": "Payment initiated",
    "data": {
        "merchantId": "PGTESTPAYUAT",
        "merchantTransactionId": "ORDER1001",
        "instrumentResponse": {
            "type": "PAY_PAGE",
            "redirectInfo": {
                "url": "https://mercury-uat.phonepe.com/transact/simulator?token=abc",
                "method": "GET",
            },
        },
    },
}


class TestInitiatePaymentEndpoint:

    def test_initiate_success(self, client):
        with patch.object(HttpTransport, "send", return_value=PAY_PAGE_RESPONSE) as mock_send:
            response = client.post('/api/v1/payments/initiate', json={
                'amount': 100,
                'redirect_url': 'https://merchant.test/return',
                'mobile_number': '+91 98765 43210',
                'transaction_id': 'ORDER1001',
            })

        assert response.status_code == 201
        data = response.get_json()
        assert data['success'] is True
        assert data['transaction_id'] == 'ORDER1001'
        assert data['data'] == PAY_PAGE_RESPONSE

        gateway_request = mock_send.call_args.args[0]
        assert gateway_request.url == 'https://phonepe.test/pg/v1/pay'
        payload = decode_payload(gateway_request.body['request'])
        assert payload['merchantId'] == 'PGTESTPAYUAT'
        assert payload['amount'] == 10000
        assert payload['mobileNumber'] == '9876543210'
        assert payload['callbackUrl'] == 'https://merchant.test/phonepe/callback'
        assert payload['paymentInstrument'] == {'type': 'PAY_PAGE'}

    def test_initiate_generates_transaction_id(self, client):
        with patch.object(HttpTransport, "send", return_value=PAY_PAGE_RESPONSE):
            response = client.post('/api/v1/payments/initiate', json={
                'amount': '49.50',
                'redirect_url': 'https://merchant.test/return',
            })

        assert response.status_code == 201
        assert len(response.get_json()['transaction_id']) == 16

    @pytest.mark.parametrize("body, field", [
        ({'redirect_url': 'https://merchant.test/return'}, 'amount'),
        ({'amount': 100}, 'redirect_url'),
        ({'amount': -5, 'redirect_url': 'https://merchant.test/return'}, 'amount'),
        ({'amount': 100, 'redirect_url': 'not a url'}, 'redirect_url'),
        ({'amount': 100, 'redirect_url': 'https://merchant.test/return', 'payment_instrument_type': 'CASH'},
         'payment_instrument_type'),
        ({'amount': 100, 'redirect_url': 'https://merchant.test/return', 'mobile_number': '123'},
         'mobile_number'),
        ({'amount': 100, 'redirect_url': 'https://merchant.test/return', 'transaction_id': 'x' * 40},
         'transaction_id'),
    ])
    def test_initiate_validation_error(self, client, body, field):
        with patch.object(HttpTransport, "send") as mock_send:
            response = client.post('/api/v1/payments/initiate', json=body)

        assert response.status_code == 400
        assert field in response.get_json()['details']
        mock_send.assert_not_called()

    def test_initiate_gateway_error(self, client):
        error = GatewayError("BAD_REQUEST", "Please check the inputs you have provided.", http_status=400)

        with patch.object(HttpTransport, "send", side_effect=error):
            response = client.post('/api/v1/payments/initiate', json={
                'amount': 100,
                'redirect_url': 'https://merchant.test/return',
            })

        assert response.status_code == 502
        data = response.get_json()
        assert data['success'] is False
        assert data['code'] == 'BAD_REQUEST'
        assert data['message'] == 'Please check the inputs you have provided.'

    def test_initiate_missing_configuration(self, app, client, monkeypatch):
        monkeypatch.setitem(app.config, 'PHONEPE_SECRET_KEY', None)
        monkeypatch.delitem(app.extensions, EXTENSION_KEY, raising=False)

        response = client.post('/api/v1/payments/initiate', json={
            'amount': 100,
            'redirect_url': 'https://merchant.test/return',
        })

        assert response.status_code == 500
        assert 'PHONEPE_SECRET_KEY' in response.get_json()['message']

    @pytest.mark.parametrize("amount", ["100.005", "0.001", 49.999])
    def test_initiate_rejects_sub_paise_amount(self, client, amount):
        with patch.object(HttpTransport, "send") as mock_send:
            response = client.post('/api/v1/payments/initiate', json={
                'amount': amount,
                'redirect_url': 'https://merchant.test/return',
            })

        assert response.status_code == 400
        assert 'at most 2 decimal places' in response.get_json()['details']['amount'][0]
        mock_send.assert_not_called()

    def test_initiate_large_amount(self, client):
        with patch.object(HttpTransport, "send", return_value=PAY_PAGE_RESPONSE) as mock_send:
            response = client.post('/api/v1/payments/initiate', json={
                'amount': 20000000,
                'redirect_url': 'https://merchant.test/return',
            })

        assert response.status_code == 201
        payload = decode_payload(mock_send.call_args.args[0].body['request'])
        assert payload['amount'] == 2000000000


class TestTransactionStatusEndpoint:

    def test_status_success(self, client):
        body = {"success": True, "code": "PAYMENT_SUCCESS", "data": {"state": "COMPLETED", "amount": 10000}}

        with patch.object(HttpTransport, "send", return_value=body) as mock_send:
            response = client.get('/api/v1/payments/ORDER1001/status')

        assert response.status_code == 200
        assert response.get_json() == {'success': True, 'data': body}

        gateway_request = mock_send.call_args.args[0]
        assert gateway_request.method == 'GET'
        assert gateway_request.url == 'https://phonepe.test/pg/v1/status/PGTESTPAYUAT/ORDER1001'
        assert gateway_request.headers['X-MERCHANT-ID'] == 'PGTESTPAYUAT'

    def test_status_gateway_error(self, client):
        error = GatewayError("TRANSACTION_NOT_FOUND", "No Transaction found with the given details.", http_status=404)

        with patch.object(HttpTransport, "send", side_effect=error):
            response = client.get('/api/v1/payments/UNKNOWN/status')

        assert response.status_code == 502
        assert response.get_json()['code'] == 'TRANSACTION_NOT_FOUND'

    def test_status_rejects_unsafe_transaction_id(self, client):
        with patch.object(HttpTransport, "send") as mock_send:
            response = client.get('/api/v1/payments/has%20space/status')

        assert response.status_code == 400
        assert 'Transaction id must be' in response.get_json()['message']
        mock_send.assert_not_called()


class TestAppWiring:

    def test_client_built_once_per_app(self, app):
        first = get_provider()
        second = get_provider()

        assert first is second
        assert app.extensions[EXTENSION_KEY] is first

    def test_request_is_logged(self, client, caplog):
        caplog.set_level(logging.INFO, logger='phonepe_client.requests')

        with patch.object(HttpTransport, "send", return_value={"success": True}):
            client.get('/api/v1/payments/ORDER1001/status')

        assert any(
            'GET /api/v1/payments/ORDER1001/status -> 200' in record.getMessage()
            for record in caplog.records
        )
