# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation): 
# Organizes the user management system that handles learner accounts, sign-up with an emailed code,
# login/logout and profile changes
# 🧪 Purpose (Technical Summary): 
# Package initialization for the user management module (domain, infrastructure, presentation layers)
# 🔗 Dependencies: 
# FastAPI, pymongo, app.shared.core, pydantic, passlib
# 🔄 Connected Modules / Calls From: 
# app.api.v1.router, authentication dependencies, course management (user snapshots)

"""
User Management Module

- Registration with email activation codes
- Email/password and social login
- JWT access/refresh tokens with cached sessions
- Self-service profile, password and avatar updates

Architecture:
- Domain: User entity, repository interface, Auth/User services
- Infrastructure: MongoDB repository implementation
- Presentation: API endpoints, schemas and dependencies
"""

__version__ = "1.0.0"
__module_name__ = "user_management"
__description__ = "User Management and Authentication Module"
