class AppError(Exception):
    status_code = 500
    error = "Application error"

    def __init__(self, message, status_code=None):
        super().__init__(message)
        if status_code:
            self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    status_code = 400
    error = "Validation error"


class ConfigurationError(AppError):
    status_code = 500
    error = "Configuration error"


class GatewayError(AppError):
    """Raised when a call to the PhonePe API fails.

    ``code`` and ``message`` come from the provider's error body when it has
    one; ``http_status`` is the provider's HTTP status (None on network errors).
    """
    status_code = 502
    error = "Gateway error"

    def __init__(self, code, message, http_status=None, response=None):
        super().__init__(f"{code} - {message}")
        self.code = code
        self.message = message
        self.http_status = http_status
        self.response = response

    def __str__(self):
        return f"{self.code} - {self.message}"
