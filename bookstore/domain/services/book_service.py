"""Book service for validating and coordinating bookstore operations."""

import logging
from typing import Optional

from ..entities.book import Book, BookDTO
from ..interfaces.book_repository import BookRepository
from .exceptions import BookNotFoundError, InvalidBookError
from .report_generator import ReportGenerator

logger = logging.getLogger(__name__)

VALID_ISBN_LENGTHS = (10, 13)

MISSING_ISBN_MESSAGE = "A book cannot be tracked with no ISBN code."
INVALID_ISBN_MESSAGE = "ISBN code is not valid."


class BookService:
    """
    Stateless service sitting between the HTTP layer and the repository.

    It owns:
    - ISBN validation on create
    - Existence checks before reads and edits
    - Conversion between BookDTO and Book
    - Report generation through the ReportGenerator

    Lookups with an empty ISBN are reported as not found rather than as a
    bad request.
    """

    def __init__(self, book_repository: BookRepository, report_generator: ReportGenerator):
        self.book_repository = book_repository
        self.report_generator = report_generator

    def get_book_by_isbn(self, isbn: Optional[str]) -> BookDTO:
        """
        Retrieve a book by ISBN.

        Args:
            isbn: The ISBN code to look up.

        Returns:
            BookDTO: The stored book.

        Raises:
            BookNotFoundError: If the ISBN is empty or no book matches.
        """
        book = self.book_repository.get_by_isbn(isbn) if isbn else None
        if book is None:
            logger.error(f"Book {isbn!r} does not exist")
            raise BookNotFoundError()

        logger.info(f"Retrieved book {isbn}")
        return book.to_dto()

    def add_book(self, book_dto: BookDTO) -> BookDTO:
        """
        Track a new book, or return the stored one if the ISBN is known.

        Args:
            book_dto: The book to add.

        Returns:
            BookDTO: The newly stored book, or the existing one unchanged.

        Raises:
            InvalidBookError: If the ISBN is missing or not 10 or 13 long.
        """
        isbn = book_dto.isbn
        if isbn is None:
            logger.error("Rejected book with no ISBN code")
            raise InvalidBookError(MISSING_ISBN_MESSAGE)
        if len(isbn) not in VALID_ISBN_LENGTHS:
            logger.error(f"Rejected book with invalid ISBN {isbn!r}")
            raise InvalidBookError(INVALID_ISBN_MESSAGE)

        existing = self.book_repository.get_by_isbn(isbn)
        if existing is not None:
            logger.info(f"Book {isbn} already exists, returning stored book")
            return existing.to_dto()

        book = Book.from_dto(book_dto)
        self.book_repository.add(book)
        logger.info(f"Added book {isbn}")
        return book.to_dto()

    def edit_book(self, isbn: Optional[str], book_dto: BookDTO) -> None:
        """
        Replace every field of an existing book.

        The path ISBN is the identity; ``book_dto.isbn`` is ignored.

        Args:
            isbn: The ISBN code of the book to edit.
            book_dto: The replacement values.

        Raises:
            BookNotFoundError: If the ISBN is empty or no book matches.
        """
        existing = self.book_repository.get_by_isbn(isbn) if isbn else None
        if existing is None:
            logger.error(f"Cannot edit book {isbn!r}: it does not exist")
            raise BookNotFoundError()

        book = Book.from_dto(book_dto, isbn=isbn)
        self.book_repository.update(isbn, book)
        logger.info(f"Edited book {isbn}")

    def delete_book(self, isbn: str) -> None:
        """Delete a book; a missing ISBN is silently ignored."""
        removed = self.book_repository.delete(isbn)
        logger.info(f"Delete requested for book {isbn} (removed={removed})")

    def generate_report(self) -> str:
        """Render every stored book as an HTML report."""
        books = self.book_repository.get_all()
        logger.info(f"Generating report for {len(books)} books")
        return self.report_generator.generate_html_report(books)
