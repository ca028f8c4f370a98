"""Infrastructure helpers for intake wizard deployments."""
