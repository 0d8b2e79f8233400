"""
App package - Application configuration and core utilities.
Contains settings and exceptions shared by both pattern systems.
"""

from app.config import settings
from app.exceptions import ServiceValidationError

__all__ = [
    "settings",
    "ServiceValidationError",
]
