"""
User Management Database Layer

MongoDB repository implementation for the User aggregate.
"""

from .user_repository_impl import UserRepositoryImpl

__all__ = ["UserRepositoryImpl"]
