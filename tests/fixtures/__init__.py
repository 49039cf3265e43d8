"""
Test Fixtures - Shared Test Data and Configurations.

    - sample_config.yaml: Zero-latency configuration with a custom catalog
"""
