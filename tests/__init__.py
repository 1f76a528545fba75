"""
Test Suite for Prospect Screener.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end orchestrator tests
    - performance/: Pool size benchmarks
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/prospect_screener      # With coverage
"""
