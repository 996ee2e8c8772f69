"""Local in-memory implementation of XmlStore."""

from typing import Optional
import xml.etree.ElementTree as ET

from ..domain.interfaces.xml_store import XmlStore
from .xml_file_store import ROOT_TAG


class InMemoryXmlStore(XmlStore):
    """In-memory implementation of the XmlStore protocol.

    Keeps the serialized document as bytes and re-parses it on every load,
    so each caller works on its own copy just like with the file store.
    Useful for testing and development purposes.
    """

    def __init__(self, content: Optional[str] = None):
        """Initialize the store.

        Args:
            content: Initial XML text. Defaults to an empty bookstore.
        """
        if content is None:
            content = f"<{ROOT_TAG} />"
        self._content: bytes = content.encode("utf-8")
        self.load_count = 0
        self.save_count = 0

    def load(self) -> ET.ElementTree:
        """Parse a fresh copy of the stored document."""
        self.load_count += 1
        return ET.ElementTree(ET.fromstring(self._content))

    def save(self, document: ET.ElementTree) -> None:
        """Replace the stored document with a serialized copy of ``document``."""
        self.save_count += 1
        self._content = ET.tostring(document.getroot(), encoding="utf-8")

    @property
    def content(self) -> str:
        """Return the stored document as text."""
        return self._content.decode("utf-8")
