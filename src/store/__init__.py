"""Query layer over loaded game datasets.

This module holds the immutable in-memory game collection and its
read-only queries. It powers the SDK client and CLI commands.
"""
