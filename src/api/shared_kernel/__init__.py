"""Shared Kernel module.

Building blocks used by more than one bounded context: the pagination
primitives (cursor codec, page envelope, keyword filter, page size bounds),
the clock abstraction and the observation context carried by domain probes.

Anything added here becomes a contract between the catalog and IAM contexts,
so keep it small and free of infrastructure imports.
"""
