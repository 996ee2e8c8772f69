"""File system implementation of XmlStore."""

import logging
import os
import xml.etree.ElementTree as ET

from ..domain.interfaces.xml_store import XmlStore

logger = logging.getLogger(__name__)

ROOT_TAG = "bookstore"


class XmlFileStore(XmlStore):
    """Reads and writes the bookstore document at a fixed file path.

    Every call opens, reads or writes, and closes the file. There is no
    locking and no atomic rename, so the last writer wins.
    """

    def __init__(self, file_path: str):
        """Initialize the file store.

        Args:
            file_path: Path of the XML document.
        """
        self.file_path = file_path

    def load(self) -> ET.ElementTree:
        """Parse the whole document from disk.

        Returns:
            ElementTree: The parsed document.

        Raises:
            FileNotFoundError: If the file does not exist.
            xml.etree.ElementTree.ParseError: If the file is not valid XML.
        """
        try:
            logger.info(f"Loading XML from file: {self.file_path}")
            return ET.parse(self.file_path)
        except Exception:
            logger.exception(f"Error loading XML from file: {self.file_path}")
            raise

    def save(self, document: ET.ElementTree) -> None:
        """Serialize the whole document and overwrite the file.

        Args:
            document: The document to write.
        """
        try:
            logger.info(f"Saving XML to file: {self.file_path}")
            ET.indent(document)
            document.write(self.file_path, encoding="utf-8", xml_declaration=True)
        except Exception:
            logger.exception(f"Error saving XML to file: {self.file_path}")
            raise

    def initialize(self) -> bool:
        """Create an empty bookstore document if the file is missing.

        Returns:
            bool: True if a file was created, False if one already existed.
        """
        if os.path.exists(self.file_path):
            return False

        directory = os.path.dirname(self.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        self.save(ET.ElementTree(ET.Element(ROOT_TAG)))
        logger.info(f"Created empty bookstore document at {self.file_path}")
        return True
