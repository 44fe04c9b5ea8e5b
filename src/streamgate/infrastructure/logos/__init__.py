from .client import HttpxLogoService

__all__ = ["HttpxLogoService"]
