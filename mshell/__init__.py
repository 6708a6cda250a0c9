"""Parsing core of a small shell: command trees, wildcards, here-documents and string helpers."""

__version__ = "0.1.0"