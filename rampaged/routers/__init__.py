"""Routers package — HTTP endpoint definitions of the reference service.

Files:
  v1/  — Versioned API routes (/api/v1/*)
"""
