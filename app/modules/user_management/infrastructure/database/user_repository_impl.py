# 📄 File: app/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for user accounts, like creating new users,
# finding existing users and saving changes to their information.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of UserRepository over a MongoDB collection (pymongo asyncio),
# mapping between User entities and BSON documents.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.user_repository (interface)
# - app.modules.user_management.domain.models.user (domain model)
# - pymongo asyncio collection API, bson.ObjectId
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (repository injection)
# - app.modules.user_management.domain.services (auth and user services)

"""
User Repository Implementation

Documents are stored with an ObjectId `_id` and the password hash under
`password`. Default reads project the hash away, mirroring a
"select: false" field.
"""

import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.config.database import USERS_COLLECTION
from app.shared.core.exceptions import ConflictError

logger = logging.getLogger(__name__)

_WITHOUT_PASSWORD = {"password": 0}


class UserRepositoryImpl(UserRepository):
    """
    MongoDB implementation of the UserRepository interface.
    """
    
    def __init__(self, database: AsyncDatabase):
        """
        Initialize the user repository.
        
        Args:
            database: Application database handle
        """
        self._collection = database[USERS_COLLECTION]
    
    @staticmethod
    def _to_document(user: User) -> Dict[str, Any]:
        document = user.model_dump(exclude={"id"})
        document["_id"] = ObjectId(user.id)
        return document
    
    @staticmethod
    def _to_domain(document: Dict[str, Any]) -> User:
        document = dict(document)
        document["_id"] = str(document["_id"])
        return User.model_validate(document)
    
    async def create(self, user: User) -> User:
        """
        Create a new user in the database.
        
        Raises:
            ConflictError: If user with email already exists
        """
        try:
            await self._collection.insert_one(self._to_document(user))
        except DuplicateKeyError as e:
            logger.warning(f"User creation failed - email already exists: {user.email}")
            raise ConflictError("Email already exists", field="email", value=user.email) from e
        
        logger.info(f"Created user with ID: {user.id}")
        user.password = None
        return user
    
    async def get_by_id(self, user_id: str, include_password: bool = False) -> Optional[User]:
        # Malformed ids surface as bson.errors.InvalidId, translated centrally
        document = await self._collection.find_one(
            {"_id": ObjectId(user_id)},
            None if include_password else _WITHOUT_PASSWORD,
        )
        return self._to_domain(document) if document else None
    
    async def get_by_email(self, email: str, include_password: bool = False) -> Optional[User]:
        document = await self._collection.find_one(
            {"email": email.strip().lower()},
            None if include_password else _WITHOUT_PASSWORD,
        )
        return self._to_domain(document) if document else None
    
    async def update(self, user: User) -> User:
        """
        Save the user document.
        
        Raises:
            ConflictError: If the new email belongs to another account
        """
        user.touch()
        fields = self._to_document(user)
        fields.pop("_id")
        if user.password is None:
            fields.pop("password")
        
        try:
            await self._collection.update_one({"_id": ObjectId(user.id)}, {"$set": fields})
        except DuplicateKeyError as e:
            raise ConflictError("Email already exists", field="email", value=user.email) from e
        
        logger.debug(f"Updated user: {user.id}")
        return user
