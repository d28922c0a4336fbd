"""
User Accounts API - registration, login and profile management with JWT auth.
"""
