# 📄 File: app/modules/course_management/__init__.py
# 🧭 Purpose (Layman Explanation): 
# Organizes the course catalog - creating and editing courses, browsing them and discussing lessons
# 🧪 Purpose (Technical Summary): 
# Package initialization for the course management module (domain, infrastructure, presentation layers)
# 🔗 Dependencies: 
# FastAPI, pymongo, redis, app.shared.core
# 🔄 Connected Modules / Calls From: 
# app.api.v1.router

"""
Course Management Module

- Admin course creation and editing with thumbnails
- Cached catalog reads (single course and full list)
- Enrolled-only lesson access
- Question/answer threads per lesson with reply notifications
"""

__version__ = "1.0.0"
__module_name__ = "course_management"
__description__ = "Course Catalog and Discussion Module"
