"""v1 router package — all /api/v1/* endpoints live here.

Files:
  orders.py     — paged + aliased sorting reference router
  customers.py  — minimal paged listing

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to rampaged/services/.
"""
