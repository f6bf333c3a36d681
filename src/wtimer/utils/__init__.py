"""Utilities for wtimer."""
