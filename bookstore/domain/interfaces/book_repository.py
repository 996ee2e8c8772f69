"""Book repository protocol."""

from typing import Optional, Protocol, runtime_checkable

from ..entities.book import Book


@runtime_checkable
class BookRepository(Protocol):
    """Protocol for book repositories.

    Uniqueness of ISBN codes is the caller's responsibility. Misses on
    update and delete are reported through the return value, never raised.
    """

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Retrieve a book by exact ISBN match.

        Args:
            isbn: The ISBN code to look up.

        Returns:
            Optional[Book]: The first matching book, or None.
        """
        ...

    def add(self, book: Book) -> None:
        """Append a book without checking for an existing ISBN.

        Args:
            book: The book to persist.
        """
        ...

    def update(self, isbn: str, book: Book) -> bool:
        """Replace every field of the book stored under ``isbn``.

        Args:
            isbn: The ISBN code used to locate the stored book.
            book: The replacement values.

        Returns:
            bool: True if a book was modified, False if none matched.
        """
        ...

    def delete(self, isbn: str) -> bool:
        """Remove the book stored under ``isbn``.

        Args:
            isbn: The ISBN code of the book to remove.

        Returns:
            bool: True if a book was removed, False if none matched.
        """
        ...

    def get_all(self) -> list[Book]:
        """List every stored book in document order.

        Returns:
            list[Book]: All books.
        """
        ...
