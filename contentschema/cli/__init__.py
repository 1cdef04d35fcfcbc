"""Command line interface for contentschema."""
