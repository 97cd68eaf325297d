"""Discovery of candidate entities and project metadata on disk."""

import json
import logging
from pathlib import Path
from typing import Iterator

from classdoc.models import NAMESPACE_SEPARATOR

logger = logging.getLogger(__name__)

EXCLUDED_DIRS = {"vendor", "node_modules"}


def find_php_files(root: Path) -> list[Path]:
    """Find PHP files under a directory, sorted for a stable run order.

    Hidden directories are skipped, as are vendor and node_modules directories
    below the root.

    Args:
        root: Directory to search

    Returns:
        Sorted list of .php file paths
    """
    if not root.is_dir():
        return []

    files = []
    for path in root.rglob("*"):
        relative_parts = path.relative_to(root).parts
        if any(part.startswith(".") or part in EXCLUDED_DIRS for part in relative_parts[:-1]):
            continue
        if path.is_file() and path.suffix.lower() == ".php":
            files.append(path)
    return sorted(files)


def identifier_for(relative_path: Path, root_namespace: str) -> str:
    """Map a path relative to the source root to a PSR-4 class name.

    "Models/User.php" under root namespace "App" becomes "App\\Models\\User".
    """
    parts = list(relative_path.with_suffix("").parts)
    return NAMESPACE_SEPARATOR.join([root_namespace] + parts)


def candidate_identifiers(source_dir: Path, root_namespace: str) -> Iterator[str]:
    """Yield one candidate entity name per PHP file under the source directory."""
    for file_path in find_php_files(source_dir):
        yield identifier_for(file_path.relative_to(source_dir), root_namespace)


def detect_framework_version(project_root: Path, package: str = "laravel/framework") -> str | None:
    """Read an installed package's version from composer.lock.

    Args:
        project_root: Directory containing composer.lock
        package: Composer package name to look up

    Returns:
        Version string such as "v6.2.0", or None if it cannot be determined
    """
    lock_path = project_root / "composer.lock"
    if not lock_path.exists():
        return None

    try:
        data = json.loads(lock_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read {lock_path}: {e}")
        return None

    if not isinstance(data, dict):
        return None

    for section in ("packages", "packages-dev"):
        for entry in data.get(section) or []:
            if isinstance(entry, dict) and entry.get("name") == package:
                version = entry.get("version")
                return version if isinstance(version, str) else None

    return None
