"""
Test Suite for Song Lookup.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Caching proxy over the real service, demo and CLI
    - performance/: Timing checks with a real simulated delay
    - fixtures/: Sample configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m "not slow"                    # Skip real-delay tests
"""
