# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A collection of helpful tools that other parts of the app use for logging and validation.

# 🧪 Purpose (Technical Summary):
# Utilities package: structured logging setup and shared validators.

# 🔄 Connected Modules / Calls From:
# Used by: app.main, middleware, domain services, request schemas
