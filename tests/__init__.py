"""
Test suite for the supply/buy statistic report

Contains:
- tests/unit/          : Unit tests for domain models and pipeline stages
"""
