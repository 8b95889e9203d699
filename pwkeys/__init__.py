"""Deterministic Ed25519 keypairs derived from a password and salt."""

__version__ = "0.1.0"
