"""
Course Management API
"""
