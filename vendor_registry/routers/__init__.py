"""Routers package — HTTP endpoint definitions.

Files:
  vendors.py  — /vendors (list, create, delete)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to vendor_registry/services/.
"""
