"""Repositories package — the only layer that issues SQL.

Files:
  base.py    — BaseRepository (list, hard delete, SQLAlchemy → StorageError)
  vendor.py  — VendorRepository (gap-filling id allocation, tagged unique violations)
"""
