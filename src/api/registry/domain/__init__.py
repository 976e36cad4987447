"""Domain layer for the Registry bounded context."""
