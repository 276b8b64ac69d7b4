"""City generation package.

This package lays out building footprints on an occupancy grid, builds the
procedural geometry for each building and collects it into a Scene.
"""
