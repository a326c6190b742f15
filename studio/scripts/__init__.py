"""Operational scripts run manually against the database."""
