"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_criteria_filter.py: Criteria filtering
    - test_sort_engine.py: Sorting and the toggle protocol
    - test_stats_aggregator.py: Dashboard statistics
    - test_record_loader.py: Ingestion boundary
    - test_csv_exporter.py: CSV export
    - test_config_loader.py: Configuration loading/validation
"""
