"""
Shared error handling package.

Defines the application error taxonomy and centralizes error-to-HTTP
mapping so that every failure is rendered as ``{"message": ...}``.
"""

from app.shared.errors.exceptions import AppError, NotFoundError

__all__ = ["AppError", "NotFoundError"]
