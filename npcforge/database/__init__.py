"""Relational save store."""
