"""Pydantic schemas package.

Folder intent:
  common.py    — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  customer.py  — Customer response model + its sort descriptor
  order.py     — Order list query, response model + its sort descriptor
"""
