from .auth_provider import AuthProviderPort
from .logo_service import LogoServicePort

__all__ = [
    "AuthProviderPort",
    "LogoServicePort",
]
