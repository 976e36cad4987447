"""FastAPI dependency providers for the Registry bounded context."""
