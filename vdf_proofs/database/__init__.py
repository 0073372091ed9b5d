"""Proof persistence module."""
