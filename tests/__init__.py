"""
Test suite for radixshift

Contains:
- tests/unit/          : Unit tests for math core, domain, contracts, pipeline stages
"""
