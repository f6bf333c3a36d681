"""Service layer for wtimer."""
