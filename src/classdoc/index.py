"""Index of parsed declarations, linked into entity descriptors on demand.

The index stands in for runtime reflection: every PHP file under the given
roots is parsed up front, and an entity's ancestor, interfaces and mixins are
looked up by name when it is resolved. Names that were referenced but never
declared in the indexed trees become external descriptors with no members.
"""

import logging
from pathlib import Path
from typing import Iterable

from classdoc.models import Declaration, EntityDescriptor
from classdoc.parsers import get_parser_for_file
from classdoc.sources import find_php_files

logger = logging.getLogger(__name__)


class UnresolvableEntityError(Exception):
    """Raised when an identifier does not name an indexed entity."""


class EntityIndex:
    """Fully qualified name -> declaration lookup with descriptor linking."""

    def __init__(self, declarations: Iterable[Declaration] = ()):
        self._declarations: dict[str, Declaration] = {}
        self._descriptors: dict[str, EntityDescriptor] = {}
        for declaration in declarations:
            self.add(declaration)

    @classmethod
    def from_paths(cls, paths: Iterable[Path]) -> "EntityIndex":
        """Parse every PHP file under the given directories.

        Args:
            paths: Directories (or single files) to index

        Returns:
            EntityIndex containing every class, interface and trait found
        """
        index = cls()
        for root in paths:
            root = Path(root)
            files = [root] if root.is_file() else find_php_files(root)
            for file_path in files:
                index.add_file(file_path, root if root.is_dir() else root.parent)
        return index

    def add_file(self, file_path: Path, root: Path) -> None:
        parser = get_parser_for_file(file_path)
        if parser is None:
            return

        try:
            source_code = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Could not read {file_path}: {e}")
            return

        relative = file_path.relative_to(root).as_posix()
        for declaration in parser.extract_declarations(source_code, relative):
            self.add(declaration)

    def add(self, declaration: Declaration) -> None:
        if declaration.name in self._declarations:
            logger.debug(f"Duplicate declaration of {declaration.name}, keeping the first")
            return
        self._declarations[declaration.name] = declaration
        self._descriptors.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._declarations

    def __len__(self) -> int:
        return len(self._declarations)

    def names(self) -> list[str]:
        return list(self._declarations)

    def get(self, name: str) -> EntityDescriptor | None:
        """Return the linked descriptor for an indexed entity, or None."""
        if name not in self._declarations:
            return None
        return self._link(name, ())

    def resolve(self, identifier: str) -> EntityDescriptor:
        """Resolve a candidate identifier to a linked descriptor.

        Raises:
            UnresolvableEntityError: If the identifier is not an indexed entity
        """
        entity = self.get(identifier.lstrip("\\"))
        if entity is None:
            raise UnresolvableEntityError(f"No class, interface or trait named {identifier}")
        return entity

    def _link(self, name: str, chain: tuple[str, ...]) -> EntityDescriptor:
        if name in self._descriptors:
            return self._descriptors[name]

        declaration = self._declarations.get(name)
        if declaration is None:
            entity = EntityDescriptor(name=name, kind="external")
            self._descriptors[name] = entity
            return entity

        if name in chain:
            # Break the cycle with a bare descriptor
            logger.warning(f"Inheritance cycle through {' -> '.join(chain + (name,))}")
            return EntityDescriptor(name=name, kind=declaration.kind, path=declaration.path)

        chain = chain + (name,)
        entity = EntityDescriptor(
            name=declaration.name,
            kind=declaration.kind,
            methods=list(declaration.methods),
            properties=list(declaration.properties),
            ancestor=self._link(declaration.extends, chain) if declaration.extends else None,
            interfaces=[self._link(i, chain) for i in declaration.implements],
            mixins=[self._link(m, chain) for m in declaration.uses],
            doc_comment=declaration.doc_comment,
            path=declaration.path,
        )
        self._descriptors[name] = entity
        return entity
