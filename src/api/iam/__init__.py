"""IAM bounded context.

Exposes the users of the external identity directory. The directory owns
the user lifecycle; nothing here stores or caches users locally.
"""
