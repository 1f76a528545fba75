"""
Integration Tests - Orchestrator End to End.

These tests drive OpportunityPipeline with the mock provider and real
engines, checking that display list and statistics stay consistent.
"""
