"""
Password hashing helpers backed by bcrypt.
"""
import bcrypt

DEFAULT_ROUNDS = 10


def hash_password(raw_password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a raw password using bcrypt and return the utf-8 string."""
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(raw_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(raw_password: str, password_hash: str) -> bool:
    """Verify a raw password against a stored bcrypt hash."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(raw_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
