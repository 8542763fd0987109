"""Point-in-time lookup layer.

This module resolves target timestamps to series indexes.
It depends only on the read-only series accessor protocol.
"""
