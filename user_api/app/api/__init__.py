"""
HTTP layer: schemas, dependency providers and versioned routers.
"""
