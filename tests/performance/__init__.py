"""
Performance Tests - Large Pools.

Marked ``slow``; skip with ``pytest -m "not slow"``.
"""
