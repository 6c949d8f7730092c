# 📄 File: app/modules/course_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation): 
# The heart of the course catalog - what a course is and the rules for editing and discussing it
# 🧪 Purpose (Technical Summary): 
# Domain layer package: Course aggregate, repository interface and domain services
# 🔗 Dependencies: 
# pydantic, app.shared.core
# 🔄 Connected Modules / Calls From: 
# Infrastructure and presentation layers
