from pathlib import Path

from classdoc.parsers.base import BaseParser

PARSER_EXTENSIONS = {".php"}


def get_parser_for_file(file_path: Path) -> BaseParser | None:
    """Return a parser for the file's language, or None if unsupported."""
    if file_path.suffix.lower() not in PARSER_EXTENSIONS:
        return None

    from classdoc.parsers.php_parser import PhpParser

    return PhpParser()
