import secrets

TRANSACTION_ID_BYTES = 8


def generate_transaction_id(nbytes: int = TRANSACTION_ID_BYTES) -> str:
    """
    Generate a random merchant transaction id.

    Args:
        nbytes: Number of random bytes (not characters)

    Returns:
        str: Hex token, two characters per byte
    """
    return secrets.token_hex(nbytes)
