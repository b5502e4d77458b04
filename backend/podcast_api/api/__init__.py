"""
API Module
HTTP transport for the services, versioned under api/v1.
"""
