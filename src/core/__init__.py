"""Shared models, configuration, errors and logging."""
