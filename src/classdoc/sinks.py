import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class SinkWriteError(Exception):
    """Raised when a generated document cannot be stored."""


class Sink(ABC):
    """Abstract destination for generated documents."""

    @abstractmethod
    def put(self, key: str, content: str) -> None:
        """Store a document.

        Args:
            key: Slug identifying the document (e.g. "app/models/user")
            content: Rendered document text

        Raises:
            SinkWriteError: If the document could not be stored
        """
        pass


class FilesystemSink(Sink):
    """Writes each document to ``<output_dir>/<key>.md``."""

    def __init__(self, output_dir: Path, suffix: str = ".md"):
        self.output_dir = Path(output_dir)
        self.suffix = suffix

    def path_for(self, key: str) -> Path:
        return self.output_dir / f"{key}{self.suffix}"

    def put(self, key: str, content: str) -> None:
        path = self.path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise SinkWriteError(f"Failed to write {path}: {e}") from e
        logger.debug(f"Wrote {path}")


class MemorySink(Sink):
    """Keeps documents in memory, keyed by slug."""

    def __init__(self):
        self.documents: dict[str, str] = {}

    def put(self, key: str, content: str) -> None:
        self.documents[key] = content
