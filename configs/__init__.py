"""Validator and built-in baseline configuration."""
