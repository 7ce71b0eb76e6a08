"""
Core orchestration pieces: exceptions, explicit context and the load pipeline.

This __init__ intentionally exports NOTHING to avoid circular imports.
"""

__all__ = []
