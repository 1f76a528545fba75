"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample engine configuration
    - profiles/high_authority.yaml: Profile overlay
    - sample_websites.json: Raw records as the acquisition service sends them
"""
