"""
Core domain models and external contracts.

This module contains the ledger records and their JSON contracts, independent
of storage, transport and the posting engine itself.
"""
