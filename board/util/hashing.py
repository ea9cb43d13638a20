"""Password hashing utilities (bcrypt)."""

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a plaintext password.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        Encoded bcrypt digest
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def check_password(password: str, digest: str) -> bool:
    """Check a plaintext password against a stored digest.

    Returns False for digests that are not valid bcrypt hashes.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), digest.encode("utf-8"))
    except ValueError:
        return False
