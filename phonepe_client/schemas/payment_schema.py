from marshmallow import Schema, fields, validate, validates, ValidationError

from phonepe_client.models import PAYMENT_INSTRUMENT_TYPES, REDIRECT_MODES
from phonepe_client.utils.validators import validate_amount, validate_phone_number, validate_transaction_id


class InitiatePaymentSchema(Schema):
    """Payment initiation request"""
    # Unquantized: sub-paise amounts must reach validate_amount as sent
    amount = fields.Decimal(required=True)
    callback_url = fields.Url(required=False)
    redirect_url = fields.Url(required=True)
    payment_instrument_type = fields.Str(
        required=False,
        load_default='PAY_PAGE',
        validate=validate.OneOf(PAYMENT_INSTRUMENT_TYPES),
    )
    mobile_number = fields.Str(required=False)
    redirect_mode = fields.Str(required=False, validate=validate.OneOf(REDIRECT_MODES))
    transaction_id = fields.Str(required=False)

    @validates('amount')
    def validate_amount(self, value, **kwargs):
        valid, error = validate_amount(value)
        if not valid:
            raise ValidationError(error)

    @validates('mobile_number')
    def validate_mobile_number(self, value, **kwargs):
        valid, error = validate_phone_number(value)
        if not valid:
            raise ValidationError(error)

    @validates('transaction_id')
    def validate_transaction_id(self, value, **kwargs):
        valid, error = validate_transaction_id(value)
        if not valid:
            raise ValidationError(error)
