"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested with mocked or zero-delay dependencies.

Test Files:
    - test_song_catalog.py: Song entity and catalog
    - test_song_cache.py: Write-once cache
    - test_catalog_service.py: In-memory service lookups
    - test_cached_service.py: Caching proxy behaviour
    - test_latency.py: Delay strategies
    - test_config_loader.py: Configuration loading/validation
"""
