"""Persistence adapters for the identity domain."""
