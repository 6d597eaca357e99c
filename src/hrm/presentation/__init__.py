"""Presentation layer for HRM."""
