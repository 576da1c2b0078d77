"""Shared building blocks: dialect metadata, errors and logging."""
