"""Storyboard identifier inventory for type-safe accessor generation."""

__version__ = "0.1.0"
