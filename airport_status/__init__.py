"""
airport-status: sequential vs concurrent fetching of FAA airport status records.

Four strategies run over the same fixed list of airport codes:
1. Sequential fetching (baseline)
2. Concurrent fetching, waiting for all results
3. Fire-and-forget tasks reporting failures to a shared handler
4. Concurrent tasks whose failures are recovered one by one at retrieval
"""

__version__ = "0.1.0"
