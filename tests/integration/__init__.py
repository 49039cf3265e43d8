"""
Integration Tests - Components Wired Together.

Integration tests run the caching proxy over the real in-memory service
with NoDelay, so they stay fast.
"""
