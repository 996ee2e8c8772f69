"""Domain entities for the bookstore application."""

from .book import (
    AUTHORS_DELIMITER,
    Book,
    BookDTO,
    check_xml_text,
    join_authors,
    split_authors,
)

__all__ = [
    "AUTHORS_DELIMITER",
    "Book",
    "BookDTO",
    "check_xml_text",
    "join_authors",
    "split_authors",
]
