"""User interfaces for relname."""
