from flask import Blueprint, request, jsonify
from marshmallow import ValidationError

from phonepe_client.providers import get_provider
from phonepe_client.schemas.payment_schema import InitiatePaymentSchema
from phonepe_client.utils.validators import sanitize_phone_number

payments_bp = Blueprint('payments', __name__)

initiate_schema = InitiatePaymentSchema()


@payments_bp.route('/initiate', methods=['POST'])
def initiate_payment():
    """
    Initiate a PhonePe payment

    Body:
        {
            "amount": 100.00,
            "redirect_url": "https://merchant.example/return",
            "callback_url": "https://merchant.example/phonepe/callback",
            "payment_instrument_type": "PAY_PAGE",
            "mobile_number": "9999999999",
            "transaction_id": "ORD12345"
        }
    """
    try:
        data = initiate_schema.load(request.get_json(silent=True) or {})
    except ValidationError as e:
        return jsonify({
            'success': False,
            'error': 'Validation error',
            'details': e.messages
        }), 400

    if data.get('mobile_number'):
        data['mobile_number'] = sanitize_phone_number(data['mobile_number'])

    client = get_provider()
    gateway_request = client.build_payment_request(data)
    result = client.send(gateway_request)

    return jsonify({
        'success': True,
        'transaction_id': gateway_request.transaction_id,
        'data': result
    }), 201


@payments_bp.route('/<transaction_id>/status', methods=['GET'])
def transaction_status(transaction_id):
    """Get the PhonePe status of a transaction"""
    client = get_provider()
    result = client.get_transaction_status({'transaction_id': transaction_id})

    return jsonify({
        'success': True,
        'data': result
    }), 200
