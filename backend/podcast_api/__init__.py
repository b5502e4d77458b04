"""
Podcasts API
CRUD backend for podcasts, their episodes and user accounts.
"""
