"""
Entity Store Gateway.

Generic CRUD HTTP service translating wire requests into store calls
for books, users and stocks.
"""

__version__ = "0.1.0"
