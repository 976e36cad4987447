"""Application layer for the Registry bounded context."""
