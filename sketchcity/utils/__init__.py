"""Shared utilities: logging, vector and matrix math, data export."""
