"""Core package for the intake wizard schema, validation and configuration."""
