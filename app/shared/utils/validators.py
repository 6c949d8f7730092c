# 📄 File: app/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation): 
# Small checkers that make sure identifiers, emails and passwords look right
# before the app uses them.
# 🧪 Purpose (Technical Summary): 
# Reusable validation helpers for document identifiers (BSON ObjectId), email
# format and password policy, shared by domain services and request schemas.
# 🔗 Dependencies: 
# re, bson (ObjectId)
# 🔄 Connected Modules / Calls From: 
# Discussion thread service, request schemas, repositories

import re

from bson import ObjectId

# Same shape the persistence layer enforces on users.email
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def is_valid_object_id(value: object) -> bool:
    """
    Check whether a value is a well-formed document identifier.
    
    Args:
        value: Candidate identifier (usually a 24-char hex string)
        
    Returns:
        True if it can be used as an ObjectId
    """
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and ObjectId.is_valid(value)


def new_object_id() -> str:
    """Generate a new identifier for an embedded document."""
    return str(ObjectId())


def is_valid_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def validate_password_length(password: str, min_length: int) -> str:
    """
    Enforce the minimum password length.
    
    Raises:
        ValueError: If the password is shorter than min_length
    """
    if len(password) < min_length:
        raise ValueError(f"Password must be at least {min_length} characters")
    return password
