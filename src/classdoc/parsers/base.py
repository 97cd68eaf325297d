from abc import ABC, abstractmethod

from classdoc.models import Declaration


class BaseParser(ABC):
    """Abstract base class for language-specific declaration parsers."""

    @abstractmethod
    def extract_declarations(self, source_code: str, file_path: str) -> list[Declaration]:
        """Extract all class-like declarations from source code.

        Args:
            source_code: The source code to parse
            file_path: Relative path to the file (for Declaration.path)

        Returns:
            List of Declaration objects found in the source code
        """
        pass
