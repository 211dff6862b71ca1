from .auth_schemas import RegisteredUser, UserLogin, UserProfile, UserRegister

__all__ = ["RegisteredUser", "UserLogin", "UserProfile", "UserRegister"]
