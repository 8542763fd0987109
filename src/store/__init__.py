"""Series storage layer.

This module persists append-only, timestamp-ordered series records.
It exposes the read-only accessor the lookup layer searches over.
"""
