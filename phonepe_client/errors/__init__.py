from phonepe_client.errors.exceptions import AppError, ValidationError, ConfigurationError, GatewayError

__all__= [
    'AppError',
    'ValidationError',
    'ConfigurationError',
    'GatewayError',
]
