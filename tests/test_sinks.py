from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from classdoc.sinks import FilesystemSink, MemorySink, Sink, SinkWriteError


def test_cannot_instantiate_base_sink():
    with pytest.raises(TypeError) as exc_info:
        Sink()

    assert "abstract" in str(exc_info.value).lower()


def test_filesystem_sink_writes_markdown_file():
    with TemporaryDirectory() as tmpdir:
        sink = FilesystemSink(Path(tmpdir) / "docs")

        sink.put("app/models/user", "# User\n")

        written = Path(tmpdir) / "docs" / "app" / "models" / "user.md"
        assert written.read_text() == "# User\n"


def test_filesystem_sink_overwrites_existing_file():
    with TemporaryDirectory() as tmpdir:
        sink = FilesystemSink(Path(tmpdir))
        sink.put("app/a", "old")

        sink.put("app/a", "new")

        assert (Path(tmpdir) / "app" / "a.md").read_text() == "new"


def test_filesystem_sink_raises_on_write_failure():
    with TemporaryDirectory() as tmpdir:
        blocker = Path(tmpdir) / "app"
        blocker.write_text("a file where a directory should be")
        sink = FilesystemSink(Path(tmpdir))

        with pytest.raises(SinkWriteError):
            sink.put("app/models/user", "# User\n")


def test_memory_sink_keeps_documents():
    sink = MemorySink()

    sink.put("app/a", "A")
    sink.put("app/b", "B")

    assert sink.documents == {"app/a": "A", "app/b": "B"}
