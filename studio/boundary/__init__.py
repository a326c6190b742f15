"""
Boundary layer for external system integrations.

Handles all interactions with the relational database.
Provides ORM models, CRUD helpers and connection management.
"""
