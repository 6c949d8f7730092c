from .courses import courses_router

__all__ = ["courses_router"]
