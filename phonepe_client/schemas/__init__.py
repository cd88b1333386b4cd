"""
Schemas Package
Marshmallow schemas for request validation
"""

from phonepe_client.schemas.payment_schema import InitiatePaymentSchema

__all__ = [
    'InitiatePaymentSchema',
]
