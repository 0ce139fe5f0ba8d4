"""Compound interest calculator backend."""

__version__ = "0.1.0"
