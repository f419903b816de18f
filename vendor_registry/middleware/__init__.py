"""Middleware package — request-level cross-cutting concerns."""
