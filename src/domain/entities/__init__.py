"""
Account Service Domain Entities
"""

from .user import User

__all__ = [
    "User",
]
