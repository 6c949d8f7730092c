"""
Course Management Infrastructure Layer
"""
