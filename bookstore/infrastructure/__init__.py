"""Infrastructure layer components."""

from .in_memory_xml_store import InMemoryXmlStore
from .xml_book_repository import XmlBookRepository
from .xml_file_store import XmlFileStore

__all__ = [
    "InMemoryXmlStore",
    "XmlBookRepository",
    "XmlFileStore",
]
