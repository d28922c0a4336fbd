"""
FastAPI application package.
"""
