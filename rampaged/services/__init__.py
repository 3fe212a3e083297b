"""Services package — business logic of the reference service, never in routers.

Files:
  order.py     — order listing / lookup
  customer.py  — customer listing

Rule: routers call services, services call repositories, repositories call the DB.
"""
