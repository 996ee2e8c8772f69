"""Book entities for the bookstore application."""

import re
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

AUTHORS_DELIMITER = ", "

# Characters outside the XML 1.0 Char production cannot be written to the document.
_INVALID_XML_CHARS = re.compile(
    r"[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def check_xml_text(value: Optional[str]) -> Optional[str]:
    """Reject text that cannot be stored in an XML 1.0 document.

    Raises:
        ValueError: If ``value`` contains a disallowed character.
    """
    if value is not None:
        match = _INVALID_XML_CHARS.search(value)
        if match:
            raise ValueError(
                f"character {match.group()!r} at position {match.start()} is not allowed in XML"
            )
    return value


def split_authors(authors: Optional[str]) -> list[str]:
    """Split a comma-and-space joined authors string into an ordered list.

    An empty or missing string yields an empty list.
    """
    if not authors:
        return []
    return authors.split(AUTHORS_DELIMITER)


def join_authors(authors: list[str]) -> str:
    """Join an ordered list of authors into the external string form."""
    return AUTHORS_DELIMITER.join(authors)


class BookDTO(BaseModel):
    """External representation of a book.

    Differs from the persisted entity in how authors are carried: a single
    comma-and-space joined string instead of a list.
    """

    isbn: Optional[str] = Field(None, description="ISBN code, 10 or 13 characters")
    title: str = Field(default="", description="Title of the book")
    authors: str = Field(default="", description="Authors joined with ', '")
    year: int = Field(default=0, description="Publication year")
    price: Decimal = Field(default=Decimal("0"), description="Price of the book")
    category: Optional[str] = Field(None, description="Category of the book")
    cover: Optional[str] = Field(None, description="Cover image of the book")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "isbn": "9780199535675",
                "title": "Ulysses",
                "authors": "James Joyce",
                "year": 1922,
                "price": "12.50",
                "category": "Fiction",
                "cover": "ulysses.jpg",
            }
        }
    )

    @field_validator("isbn", "title", "authors", "category", "cover")
    @classmethod
    def validate_xml_text(cls, value: Optional[str]) -> Optional[str]:
        return check_xml_text(value)


class Book(BaseModel):
    """Book entity as persisted in the bookstore document."""

    isbn: str = Field(description="Unique identifier of the book")
    title: str = Field(description="Title of the book")
    authors: list[str] = Field(default_factory=list, description="Ordered list of authors")
    year: int = Field(description="Publication year")
    price: Decimal = Field(description="Price of the book")
    category: Optional[str] = Field(None, description="Category of the book")
    cover: Optional[str] = Field(None, description="Cover image, absent unless supplied")

    @field_validator("isbn", "title", "category", "cover")
    @classmethod
    def validate_xml_text(cls, value: Optional[str]) -> Optional[str]:
        return check_xml_text(value)

    @field_validator("authors")
    @classmethod
    def validate_authors(cls, value: list[str]) -> list[str]:
        for author in value:
            check_xml_text(author)
        return value

    @classmethod
    def from_dto(cls, dto: BookDTO, isbn: Optional[str] = None) -> "Book":
        """Build an entity from a DTO.

        Args:
            dto: The external representation.
            isbn: Identity to use instead of ``dto.isbn``.

        Returns:
            Book: The entity with authors split into a list.
        """
        return cls(
            isbn=isbn if isbn is not None else dto.isbn,
            title=dto.title,
            authors=split_authors(dto.authors),
            year=dto.year,
            price=dto.price,
            category=dto.category,
            cover=dto.cover,
        )

    def to_dto(self) -> BookDTO:
        """Convert the entity to its external representation."""
        return BookDTO(
            isbn=self.isbn,
            title=self.title,
            authors=join_authors(self.authors),
            year=self.year,
            price=self.price,
            category=self.category,
            cover=self.cover,
        )
