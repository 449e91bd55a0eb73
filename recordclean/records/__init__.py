"""Boundary helpers for record-management API responses."""

from .response import standardize_response

__all__ = ["standardize_response"]
