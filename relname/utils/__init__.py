"""Utility helpers for relname."""

from .clean import clean_string

__all__ = ['clean_string']
