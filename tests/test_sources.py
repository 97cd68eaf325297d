import json
from pathlib import Path
from tempfile import TemporaryDirectory

from classdoc.sources import (
    candidate_identifiers,
    detect_framework_version,
    find_php_files,
    identifier_for,
)


def _touch(path: Path, text: str = "<?php\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


def test_identifier_for_maps_path_to_namespace():
    assert identifier_for(Path("Models/User.php"), "App") == "App\\Models\\User"
    assert identifier_for(Path("Kernel.php"), "App") == "App\\Kernel"


def test_find_php_files_is_sorted_and_filtered():
    with TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _touch(root / "Models" / "User.php")
        _touch(root / "Console" / "Kernel.php")
        _touch(root / "readme.txt")
        _touch(root / ".hidden" / "Secret.php")
        _touch(root / "vendor" / "Lib.php")

        files = [p.relative_to(root).as_posix() for p in find_php_files(root)]

        assert files == ["Console/Kernel.php", "Models/User.php"]


def test_find_php_files_missing_directory():
    assert find_php_files(Path("/nonexistent/classdoc")) == []


def test_candidate_identifiers():
    with TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _touch(root / "Http" / "Controllers" / "Controller.php")
        _touch(root / "User.php")

        assert list(candidate_identifiers(root, "App")) == [
            "App\\Http\\Controllers\\Controller",
            "App\\User",
        ]


class TestDetectFrameworkVersion:
    """Tests for reading the framework version from composer.lock."""

    def test_no_lock_file(self):
        with TemporaryDirectory() as tmpdir:
            assert detect_framework_version(Path(tmpdir)) is None

    def test_version_from_packages(self):
        with TemporaryDirectory() as tmpdir:
            lock = {"packages": [
                {"name": "guzzlehttp/guzzle", "version": "6.5.0"},
                {"name": "laravel/framework", "version": "v6.2.0"},
            ]}
            (Path(tmpdir) / "composer.lock").write_text(json.dumps(lock))

            assert detect_framework_version(Path(tmpdir)) == "v6.2.0"

    def test_version_from_dev_packages(self):
        with TemporaryDirectory() as tmpdir:
            lock = {"packages": [], "packages-dev": [{"name": "acme/kit", "version": "1.4.2"}]}
            (Path(tmpdir) / "composer.lock").write_text(json.dumps(lock))

            assert detect_framework_version(Path(tmpdir), "acme/kit") == "1.4.2"

    def test_package_not_installed(self):
        with TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "composer.lock").write_text(json.dumps({"packages": []}))

            assert detect_framework_version(Path(tmpdir)) is None

    def test_invalid_json(self):
        with TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "composer.lock").write_text("{not json")

            assert detect_framework_version(Path(tmpdir)) is None
