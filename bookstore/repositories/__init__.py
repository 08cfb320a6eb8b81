"""
Repositories Package

Translate domain operations into MongoDB calls. Repositories perform no
business validation; callers validate ids and pagination first.
"""

from bookstore.repositories.books import BookRepository

__all__ = ["BookRepository"]
