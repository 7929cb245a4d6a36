"""
Security-related HTTP helpers (CORS).
"""
