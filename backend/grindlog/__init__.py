"""Grindlog backend package."""
