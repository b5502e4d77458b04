"""
Core Module
Settings, security helpers and constants shared across the application.
"""
