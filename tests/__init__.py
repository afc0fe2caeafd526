"""
Test suite for the ledger posting engine

Contains:
- tests/unit/          : Unit tests for domain models, contracts and posting
"""
