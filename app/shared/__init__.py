"""
Shared module package.

Contains cross-cutting concerns used across the application:
- Error types and error-to-HTTP mapping
- Security middleware
- Rate limiting
- Logging configuration
"""
