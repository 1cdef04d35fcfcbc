"""Utility modules for contentschema."""
