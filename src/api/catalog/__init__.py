"""Catalog bounded context.

Owns tenant-scoped product records and the store backends that persist them.
"""
