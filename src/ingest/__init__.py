"""Dataset ingestion.

This module parses delimited game datasets into typed records.
It prepares the immutable record tuple held by the store layer.
"""
