# 📄 File: app/modules/course_management/domain/repositories/course_repository.py
# 🧭 Purpose (Layman Explanation): 
# Defines the contract for storing and loading courses without tying the business rules
# to a particular database
# 🧪 Purpose (Technical Summary): 
# Repository interface for the Course aggregate. Thread mutations rewrite the whole aggregate
# through `save`; catalog edits use field-level `update_fields`.
# 🔗 Dependencies: 
# Domain models (Course), typing, abc
# 🔄 Connected Modules / Calls From: 
# CourseService, DiscussionService, infrastructure implementation, test doubles

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.course import Course


class CourseRepository(ABC):
    """
    Repository interface for Course aggregate data access.
    
    Implementation Notes:
    - No version check is made on `save`: concurrent writers to the same
      course are last-write-wins
    """
    
    @abstractmethod
    async def create(self, course: Course) -> Course:
        pass
    
    @abstractmethod
    async def get_by_id(self, course_id: str) -> Optional[Course]:
        """
        Get a course by ID.
        
        Returns:
            Course if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def list_all(self) -> List[Course]:
        pass
    
    @abstractmethod
    async def update_fields(self, course_id: str, fields: Dict[str, Any]) -> Optional[Course]:
        """
        Set top-level fields and return the updated course.
        
        Args:
            course_id: Course to update
            fields: Field name -> new value (already serializable)
            
        Returns:
            Updated Course, or None if it does not exist
        """
        pass
    
    @abstractmethod
    async def save(self, course: Course) -> Course:
        """Replace the stored aggregate with `course`."""
        pass
