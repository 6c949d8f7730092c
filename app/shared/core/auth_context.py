"""
Authenticated identity passed explicitly from the auth dependencies to handlers
and domain services.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict


class AuthContext(BaseModel):
    """
    Immutable identity resolved from a valid access token and its session.
    
    `record` is the user record exactly as cached in the session store
    (public fields only, never the password hash).
    """
    
    model_config = ConfigDict(frozen=True)
    
    user_id: str
    role: str
    record: Dict[str, Any]
    
    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "AuthContext":
        return cls(
            user_id=str(record["_id"]),
            role=record.get("role", "User"),
            record=record,
        )
    
    @property
    def name(self) -> str:
        return self.record.get("name", "")
    
    @property
    def email(self) -> str:
        return self.record.get("email", "")
    
    @property
    def course_ids(self) -> List[str]:
        return [course.get("course_id") for course in self.record.get("courses", [])]
    
    def has_role(self, *roles: str) -> bool:
        return self.role in roles
    
    def snapshot(self) -> Dict[str, Any]:
        """Author snapshot embedded into questions and replies."""
        return {
            "_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "avatar": self.record.get("avatar"),
            "role": self.role,
        }
