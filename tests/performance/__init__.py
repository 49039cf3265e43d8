"""
Performance Tests.

Checks that a cache hit skips the simulated server delay while misses,
unknown ids and scans pay it every time. Marked slow.
"""
