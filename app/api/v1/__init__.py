# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation): 
# Marks version 1 of the e-learning API
# 🧪 Purpose (Technical Summary): 
# API v1 package initialization
# 🔗 Dependencies: 
# None (package initialization)
# 🔄 Connected Modules / Calls From: 
# app.main.py

__version__ = "1.0.0"
__api_version__ = "v1"
API_V1_PREFIX = "/api/v1"
