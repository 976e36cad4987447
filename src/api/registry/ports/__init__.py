"""Ports (interfaces) for the Registry bounded context."""
