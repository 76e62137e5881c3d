"""
Schemas module - Request/Response schemas for API endpoints,
plus the JSON contracts AI output must satisfy.
"""
