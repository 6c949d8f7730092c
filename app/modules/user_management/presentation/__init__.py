# 📄 File: app/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the presentation layer for user management - the web endpoints people
# call to sign up, log in and manage their accounts.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer initialization: FastAPI routers, Pydantic schemas and dependency wiring.
#
# 🔗 Dependencies:
# - FastAPI for HTTP endpoint routing and OpenAPI documentation
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (includes the user management router)
