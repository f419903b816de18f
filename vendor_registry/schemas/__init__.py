"""Pydantic schemas package.

Folder intent:
  common.py  — ApiModel base + HealthResponse (all schemas inherit ApiModel)
  vendor.py  — VendorCreate request body and VendorOut response model
"""
