"""Typer command modules for wtimer."""
