"""Stripe transaction gateway."""

__version__ = "1.0.0"
