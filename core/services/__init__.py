"""Services for the core app."""
