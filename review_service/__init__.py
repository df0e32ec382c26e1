"""Review reminder service Django project."""
