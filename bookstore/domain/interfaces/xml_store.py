"""XML store protocol."""

from typing import Protocol, runtime_checkable
from xml.etree.ElementTree import ElementTree


@runtime_checkable
class XmlStore(Protocol):
    """Protocol for whole-document XML storage.

    Implementations load and save the complete bookstore document in one
    call. They do not coordinate concurrent callers: two interleaved
    load/save cycles may lose the earlier write.
    """

    def load(self) -> ElementTree:
        """Load the full document.

        Returns:
            ElementTree: A freshly parsed document.

        Raises:
            FileNotFoundError: If the backing file does not exist.
            xml.etree.ElementTree.ParseError: If the document is malformed.
        """
        ...

    def save(self, document: ElementTree) -> None:
        """Overwrite the stored document with ``document``.

        Args:
            document: The complete document to persist.
        """
        ...
