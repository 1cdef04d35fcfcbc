"""Service layer for contentschema."""
