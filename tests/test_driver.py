from classdoc.driver import RunReport, generate_documentation
from classdoc.index import UnresolvableEntityError
from classdoc.links import LinkResolver
from classdoc.sinks import MemorySink, Sink, SinkWriteError
from classdoc.summarizer import EntitySummarizer

from conftest import make_entity


class FailingSink(Sink):
    """Sink that refuses one key and stores the rest."""

    def __init__(self, bad_key):
        self.bad_key = bad_key
        self.documents = {}

    def put(self, key, content):
        if key == self.bad_key:
            raise SinkWriteError(f"disk full writing {key}")
        self.documents[key] = content


def make_resolver(entities):
    by_name = {entity.name: entity for entity in entities}
    return by_name.get


def test_one_document_per_resolvable_candidate():
    entities = [make_entity("App\\Models\\User"), make_entity("App\\Models\\Post")]
    sink = MemorySink()

    report = generate_documentation(
        ["App\\Models\\User", "App\\helpers", "App\\Models\\Post", "App\\routes"],
        make_resolver(entities),
        sink,
    )

    assert report.generated == ["app/models/user", "app/models/post"]
    assert report.skipped == ["App\\helpers", "App\\routes"]
    assert report.ok
    assert set(sink.documents) == {"app/models/user", "app/models/post"}
    assert sink.documents["app/models/user"].startswith("# User\n")


def test_resolver_errors_are_skipped():
    def resolve(identifier):
        if identifier == "App\\Broken":
            raise UnresolvableEntityError("not a class")
        return make_entity(identifier)

    sink = MemorySink()
    report = generate_documentation(["App\\Broken", "App\\Fine"], resolve, sink)

    assert report.skipped == ["App\\Broken"]
    assert list(sink.documents) == ["app/fine"]


def test_sink_failure_is_recorded_and_run_continues():
    entities = [make_entity("App\\A"), make_entity("App\\B"), make_entity("App\\C")]
    sink = FailingSink("app/b")

    report = generate_documentation(["App\\A", "App\\B", "App\\C"], make_resolver(entities), sink)

    assert report.generated == ["app/a", "app/c"]
    assert report.failed == [("app/b", "disk full writing app/b")]
    assert not report.ok
    assert set(sink.documents) == {"app/a", "app/c"}


def test_custom_summarizer_and_renderer_are_used():
    summarizer = EntitySummarizer(LinkResolver(root_namespace="Acme"))
    sink = MemorySink()

    generate_documentation(
        ["Acme\\Billing\\Invoice"],
        make_resolver([make_entity("Acme\\Billing\\Invoice")]),
        sink,
        summarizer,
        render=lambda summary: summary.short_name,
    )

    assert sink.documents == {"acme/billing/invoice": "Invoice"}


def test_empty_candidate_list():
    report = generate_documentation([], make_resolver([]), MemorySink())

    assert report == RunReport()
    assert report.ok
