from .auth_service import AuthService, hash_password, verify_password

__all__ = ["AuthService", "hash_password", "verify_password"]
