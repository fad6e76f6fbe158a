# flowplanr/utils/password.py

def hash_password(password: str) -> str:
    """Store password as plain text (DEV ONLY)"""
    return password

def verify_password(plain_password: str, stored_password: str) -> bool:
    """Compare passwords as plain text (DEV ONLY)"""
    return plain_password == stored_password
