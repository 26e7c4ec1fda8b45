"""Custom exception hierarchy for cropview."""

from __future__ import annotations


class CropViewError(Exception):
    """Base class for all custom errors raised by cropview."""


class GeometryError(CropViewError):
    """Base class for errors describing unusable geometry input."""


class InvalidSizeError(GeometryError):
    """Raised when a size mapping lacks a usable width or height."""
