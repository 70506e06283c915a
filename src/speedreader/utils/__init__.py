"""Shared utilities: exceptions, error messages and structured logging."""
