"""Professional CV Analysis API."""
