# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder contains the e-learning platform's backend code
# and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version metadata for the E-Learning FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - Package imports throughout the application

"""
E-Learning Platform Backend API

Registration with email activation, JWT sessions cached in Redis, a course
catalog with cached reads and per-lesson question/answer threads.
"""

__version__ = "1.0.0"
__title__ = "E-Learning Backend API"
__description__ = "Course selling and e-learning platform backend"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
