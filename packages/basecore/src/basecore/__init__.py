"""
basecore - shared process plumbing (settings, database, logging).

Nothing in here knows about record types or HTTP routes.
"""
