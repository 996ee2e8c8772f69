"""XML document implementation of BookRepository."""

import logging
from decimal import Decimal
from typing import Optional
import xml.etree.ElementTree as ET

from ..domain.entities.book import Book
from ..domain.interfaces.book_repository import BookRepository
from ..domain.interfaces.xml_store import XmlStore
from .xml_file_store import ROOT_TAG

logger = logging.getLogger(__name__)


class XmlBookRepository(BookRepository):
    """Repository for books stored as ``book`` elements of a bookstore document.

    Every operation loads the full document from the store. Mutations edit
    it in memory and save the whole document back. Nothing is cached.
    """

    def __init__(self, store: XmlStore):
        """Initialize the repository.

        Args:
            store: The store holding the bookstore document.
        """
        self.store = store

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Retrieve the first book whose ISBN equals ``isbn`` exactly.

        Args:
            isbn: The ISBN code to look up.

        Returns:
            Optional[Book]: The book, or None if no element matches.
        """
        document = self.store.load()
        element = self._find(self._bookstore(document), isbn)
        if element is None:
            return None
        return self._element_to_book(element)

    def add(self, book: Book) -> None:
        """Append a new book element and save the document.

        Args:
            book: The book to persist. Its ISBN is not checked for duplicates.
        """
        document = self.store.load()
        bookstore = self._bookstore(document)
        bookstore.append(self._book_to_element(book))
        self.store.save(document)
        logger.debug(f"Appended book {book.isbn}")

    def update(self, isbn: str, book: Book) -> bool:
        """Overwrite every field of the book stored under ``isbn``.

        The element is located by ``isbn``, not by ``book.isbn``.

        Args:
            isbn: The ISBN code used to locate the element.
            book: The replacement values.

        Returns:
            bool: True if the element was found and saved, False otherwise.
        """
        document = self.store.load()
        element = self._find(self._bookstore(document), isbn)
        if element is None:
            logger.debug(f"Book {isbn} not found, nothing updated")
            return False

        self._set_attribute(element, "category", book.category)
        self._set_attribute(element, "cover", book.cover)
        self._set_child_text(element, "isbn", book.isbn)
        self._set_child_text(element, "title", book.title)

        for author in element.findall("author"):
            element.remove(author)
        position = list(element).index(element.find("title")) + 1
        for offset, author in enumerate(book.authors):
            child = ET.Element("author")
            child.text = author
            element.insert(position + offset, child)

        self._set_child_text(element, "year", str(book.year))
        self._set_child_text(element, "price", str(book.price))

        self.store.save(document)
        return True

    def delete(self, isbn: str) -> bool:
        """Remove the book stored under ``isbn`` and save the document.

        Args:
            isbn: The ISBN code of the book to remove.

        Returns:
            bool: True if an element was removed, False otherwise.
        """
        document = self.store.load()
        bookstore = self._bookstore(document)
        element = self._find(bookstore, isbn)
        if element is None:
            logger.debug(f"Book {isbn} not found, nothing deleted")
            return False

        bookstore.remove(element)
        self.store.save(document)
        return True

    def get_all(self) -> list[Book]:
        """List every book in document order."""
        document = self.store.load()
        return [
            self._element_to_book(element)
            for element in self._bookstore(document).findall("book")
        ]

    def _bookstore(self, document: ET.ElementTree) -> ET.Element:
        root = document.getroot()
        if root is None or root.tag != ROOT_TAG:
            tag = None if root is None else root.tag
            raise ValueError(f"Expected <{ROOT_TAG}> root element, found <{tag}>")
        return root

    def _find(self, bookstore: ET.Element, isbn: str) -> Optional[ET.Element]:
        for element in bookstore.findall("book"):
            if self._required_text(element, "isbn") == isbn:
                return element
        return None

    def _element_to_book(self, element: ET.Element) -> Book:
        """Convert a ``book`` element to a Book entity.

        Raises:
            ValueError: If ``isbn`` or ``title`` is missing, or ``year`` is
                not an integer.
            decimal.InvalidOperation: If ``price`` is not a number.
        """
        return Book(
            isbn=self._required_text(element, "isbn"),
            title=self._required_text(element, "title"),
            authors=[author.text or "" for author in element.findall("author")],
            year=int(self._required_text(element, "year")),
            price=Decimal(self._required_text(element, "price")),
            category=element.get("category"),
            cover=element.get("cover"),
        )

    def _book_to_element(self, book: Book) -> ET.Element:
        element = ET.Element("book")
        if book.category is not None:
            element.set("category", book.category)
        if book.cover is not None:
            element.set("cover", book.cover)

        ET.SubElement(element, "isbn").text = book.isbn
        ET.SubElement(element, "title").text = book.title
        for author in book.authors:
            ET.SubElement(element, "author").text = author
        ET.SubElement(element, "year").text = str(book.year)
        ET.SubElement(element, "price").text = str(book.price)
        return element

    @staticmethod
    def _required_text(element: ET.Element, tag: str) -> str:
        child = element.find(tag)
        if child is None:
            raise ValueError(f"<book> element is missing required <{tag}>")
        return child.text or ""

    @staticmethod
    def _set_attribute(element: ET.Element, name: str, value: Optional[str]) -> None:
        if value is None:
            element.attrib.pop(name, None)
        else:
            element.set(name, value)

    @staticmethod
    def _set_child_text(element: ET.Element, tag: str, text: str) -> None:
        child = element.find(tag)
        if child is None:
            child = ET.SubElement(element, tag)
        child.text = text
