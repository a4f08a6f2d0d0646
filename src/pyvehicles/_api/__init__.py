"""Endpoint modules for the remote pricing and maps services."""
