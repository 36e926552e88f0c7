"""Presentation-independent launcher logic."""
