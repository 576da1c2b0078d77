"""Orchestration over the parse -> categorize pipeline."""
