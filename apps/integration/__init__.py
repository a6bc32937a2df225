"""Conversion between entities and Data Transfer Objects."""
