"""Vendor Registry — vendor CRUD service with gap-filling id allocation."""
