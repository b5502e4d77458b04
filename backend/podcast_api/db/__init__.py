"""
Database Module
Declarative base, async engine/session factory and the generic repository.
"""
