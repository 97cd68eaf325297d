"""Configuration management for documentation generation."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from classdoc.classifier import MODES
from classdoc.links import (
    DEFAULT_EXTERNAL_BASE_URL,
    DEFAULT_FRAMEWORK_VERSION,
    DEFAULT_ROOT_NAMESPACE,
)
from classdoc.sources import detect_framework_version

CONFIG_FILE_NAME = ".classdoc"


@dataclass
class DocsConfig:
    """Configuration for a documentation run.

    Attributes:
        source_dir: Directory holding the documented classes, relative to the
            project root.
        output_dir: Directory the Markdown pages are written to.
        root_namespace: Namespace mapped onto source_dir; entities under it
            are internal and link to generated pages.
        external_base_url: Base URL of the framework's API documentation.
        framework_version: Framework version used in external links. None
            means read it from composer.lock.
        framework_package: Composer package whose version is looked up.
        classification: Member classification mode, "compat" or "strict".
        reference_paths: Extra directories indexed for inheritance lookups
            but not documented (e.g. vendor/laravel/framework/src). When
            empty, the framework package under vendor/ is used if installed.
        lenient_docblocks: Accept `@var <type>` tags without a variable
            name and use the first docblock line as a property description.
    """
    source_dir: str = "app"
    output_dir: str = "docs"
    root_namespace: str = DEFAULT_ROOT_NAMESPACE
    external_base_url: str = DEFAULT_EXTERNAL_BASE_URL
    framework_version: str | None = None
    framework_package: str = "laravel/framework"
    classification: str = "compat"
    reference_paths: list[str] = field(default_factory=list)
    lenient_docblocks: bool = False

    def resolved_version(self, project_root: Path) -> str:
        """Framework version from config, composer.lock, or the default."""
        if self.framework_version:
            return self.framework_version

        return detect_framework_version(project_root, self.framework_package) or DEFAULT_FRAMEWORK_VERSION

    def inheritance_paths(self, project_root: Path) -> list[Path]:
        """Directories indexed only so inherited members can be told apart.

        Configured reference_paths win. Without them, the framework's own
        sources are picked up from vendor/<framework_package>/src.
        """
        if self.reference_paths:
            return [project_root / path for path in self.reference_paths]

        vendored = project_root / "vendor" / self.framework_package / "src"
        if vendored.is_dir():
            return [vendored]
        return []


def _string(value, default: str) -> str:
    return value if isinstance(value, str) and value else default


def load_docs_config(project_root: Path | None = None) -> DocsConfig:
    """Load documentation configuration from the .classdoc file in the project root.

    Args:
        project_root: Path to the project root. If None, uses current directory.

    Returns:
        DocsConfig object with loaded or default values.

    Notes:
        If the .classdoc file doesn't exist or can't be parsed, returns default config.
        Expected YAML structure:

        ```yaml
        docs:
          source_dir: app
          output_dir: docs
          root_namespace: App
          framework_version: "6.2"
          classification: compat
          reference_paths:
            - vendor/laravel/framework/src
          lenient_docblocks: false
        ```
    """
    if project_root is None:
        project_root = Path.cwd()

    config_path = project_root / CONFIG_FILE_NAME

    if not config_path.exists():
        return DocsConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return DocsConfig()

        docs_config = data.get("docs", {})
        if not isinstance(docs_config, dict):
            return DocsConfig()

        defaults = DocsConfig()

        framework_version = docs_config.get("framework_version")
        if framework_version is not None:
            framework_version = str(framework_version)

        classification = docs_config.get("classification", defaults.classification)
        if classification not in MODES:
            classification = defaults.classification

        reference_paths = docs_config.get("reference_paths") or []
        if not isinstance(reference_paths, list):
            reference_paths = []

        return DocsConfig(
            source_dir=_string(docs_config.get("source_dir"), defaults.source_dir),
            output_dir=_string(docs_config.get("output_dir"), defaults.output_dir),
            root_namespace=_string(docs_config.get("root_namespace"), defaults.root_namespace),
            external_base_url=_string(
                docs_config.get("external_base_url"),
                defaults.external_base_url
            ),
            framework_version=framework_version,
            framework_package=_string(
                docs_config.get("framework_package"),
                defaults.framework_package
            ),
            classification=classification,
            reference_paths=[str(path) for path in reference_paths],
            lenient_docblocks=docs_config.get("lenient_docblocks") is True,
        )
    except (yaml.YAMLError, OSError, KeyError, TypeError, ValueError):
        # Return default config on any parsing errors
        return DocsConfig()
