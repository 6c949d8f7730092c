"""
Infrastructure layer package for the E-Learning API.
Provides the MongoDB connection, Redis cache, transactional email and image storage.
"""
