"""Domain interfaces for the bookstore application."""

from .book_repository import BookRepository
from .xml_store import XmlStore

__all__ = ["BookRepository", "XmlStore"]
