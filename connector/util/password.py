"""Password hashing utilities (bcrypt)."""

import bcrypt

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a random salt.

    Args:
        password: Plain text password
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash as text
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain text password against a stored bcrypt hash.

    Args:
        password: Plain text password supplied by the client
        password_hash: Stored hash

    Returns:
        True if the password matches
    """
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
