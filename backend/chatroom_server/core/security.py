# chatroom_server/core/security.py
"""
Password hashing and verification.
Accounts store only the argon2 hash produced here; plaintext never reaches the store.
"""
from passlib.context import CryptContext

# Password hashing context
# Argon2 is a modern, salted, memory-hard hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database). A fresh salt is
        drawn on every call, so hashing the same password twice gives two
        different strings.
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str | None) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password from database

    Returns:
        True if password matches, False otherwise. A missing or unrecognised
        hash counts as a mismatch instead of raising.
    """
    if not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        # passlib raises ValueError for hashes it cannot identify
        return False

_dummy_hash: str | None = None

def dummy_hash() -> str:
    """Hash verified against when the account does not exist, so both failures cost the same."""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("not-a-real-account")
    return _dummy_hash
