"""
Security middleware package.

Secure response headers and request rate limiting.
"""
