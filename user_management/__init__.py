"""User management service."""
