"""Structural patterns."""
