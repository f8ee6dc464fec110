"""Stockroom bounded context."""
