"""Multiformats encoding utilities."""
