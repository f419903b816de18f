"""Core package — settings and application exceptions."""
