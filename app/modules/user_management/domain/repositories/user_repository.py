# 📄 File: app/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation): 
# Defines the contract for how to save, find and update user information without
# specifying the actual database technology
# 🧪 Purpose (Technical Summary): 
# Repository interface for the User aggregate following the Repository pattern and
# dependency inversion principle
# 🔗 Dependencies: 
# Domain models (User), typing, abc
# 🔄 Connected Modules / Calls From: 
# Domain services, infrastructure implementations, test doubles

from abc import ABC, abstractmethod
from typing import Optional

from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.
    
    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (User), not raw documents
    - Password hashes are only loaded when explicitly requested
    - All operations are async for non-blocking I/O
    """
    
    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.
        
        Args:
            user: User entity to create (password already hashed)
            
        Returns:
            Created User entity
            
        Raises:
            ConflictError: If a user with the email already exists
        """
        pass
    
    @abstractmethod
    async def get_by_id(self, user_id: str, include_password: bool = False) -> Optional[User]:
        """
        Get user by ID.
        
        Args:
            user_id: User ID to find
            include_password: Also load the password hash
            
        Returns:
            User entity if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def get_by_email(self, email: str, include_password: bool = False) -> Optional[User]:
        """
        Get user by email address.
        
        Args:
            email: Email address to find
            include_password: Also load the password hash
            
        Returns:
            User entity if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Persist the whole user document.
        
        A password hash of None on the entity leaves the stored hash untouched.
        
        Args:
            user: User entity with updated data
            
        Returns:
            Updated User entity
        """
        pass
    
    async def exists_by_email(self, email: str) -> bool:
        """Check whether an account already uses this email."""
        return await self.get_by_email(email) is not None
