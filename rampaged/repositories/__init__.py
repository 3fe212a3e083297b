"""Repositories package — all SQLAlchemy queries of the reference service live here."""
