"""Parsers for Japanese dictionary files."""
