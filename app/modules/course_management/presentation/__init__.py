"""
Course Management Presentation Layer

FastAPI routers, Pydantic schemas and dependency wiring for the course endpoints.
"""
