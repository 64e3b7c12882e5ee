"""Password hashing for the catalog account.

Hashes are produced by werkzeug's salted, adaptive hashers. Verification
never raises: a wrong password, an empty one or an unreadable stored hash
all come back as ``False``.
"""

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(plaintext: str) -> str:
    if not plaintext:
        raise ValueError("Password must not be empty")
    return generate_password_hash(plaintext)


def verify_password(plaintext: str | None, stored_hash: str | None) -> bool:
    if not plaintext or not stored_hash:
        return False
    try:
        return check_password_hash(stored_hash, plaintext)
    except (ValueError, TypeError):
        # unknown hash method or a value that was never a werkzeug hash
        return False
