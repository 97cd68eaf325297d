"""classdoc - Markdown class documentation for PHP projects."""

try:
    from importlib.metadata import version

    __version__ = version("classdoc")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development
