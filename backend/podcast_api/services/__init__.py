"""
Services Module
Business logic layer for the application.

Services validate input, call their injected repositories and return a
result object; they are called by API endpoints and keep the controllers thin.
"""
