"""Packaged knowledge-base data files."""
