"""
Application services - orchestration of domain and infrastructure.
"""
from .auth_service import AuthService, AuthResult, RegisterRequest, LoginRequest
from .user_service import UserService

__all__ = [
    'AuthService',
    'AuthResult',
    'RegisterRequest',
    'LoginRequest',
    'UserService',
]
