"""Infrastructure layer for the Registry bounded context."""
