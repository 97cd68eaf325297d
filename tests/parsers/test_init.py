from pathlib import Path

from classdoc.parsers import get_parser_for_file
from classdoc.parsers.php_parser import PhpParser


def test_get_parser_for_php_file():
    parser = get_parser_for_file(Path("User.php"))

    assert parser is not None
    assert isinstance(parser, PhpParser)


def test_get_parser_for_uppercase_extension():
    parser = get_parser_for_file(Path("User.PHP"))

    assert parser is not None
    assert isinstance(parser, PhpParser)


def test_get_parser_for_unsupported_file():
    parser = get_parser_for_file(Path("notes.txt"))

    assert parser is None


def test_get_parser_for_python_file():
    parser = get_parser_for_file(Path("script.py"))

    # Only PHP sources are documented
    assert parser is None
