from __future__ import annotations


class AppError(Exception):
    """Base error for domain/application exceptions."""


class ConfigurationError(AppError):
    """Raised when settings cannot produce a usable database connection."""
