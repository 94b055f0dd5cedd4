"""
Utilities for snake-core.
"""
