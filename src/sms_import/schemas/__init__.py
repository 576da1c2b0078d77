"""Pydantic schemas shared across the pipeline."""
