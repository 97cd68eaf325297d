import pytest

from classdoc.links import LinkResolver, class_slug, kebab_case, root_segment, short_version

from conftest import make_entity


@pytest.mark.parametrize("value,expected", [
    ("User", "user"),
    ("BarBaz", "bar-baz"),
    ("HTTPClient", "h-t-t-p-client"),
    ("already", "already"),
    ("App", "app"),
])
def test_kebab_case(value, expected):
    assert kebab_case(value) == expected


def test_internal_slug_kebab_cases_every_segment():
    assert class_slug("Foo\\BarBaz\\Qux") == "foo/bar-baz/qux"


def test_external_slug_keeps_case():
    slug = class_slug("Illuminate\\Database\\Eloquent\\Model", internal=False)

    assert slug == "Illuminate/Database/Eloquent/Model"


def test_slug_ignores_leading_separator():
    assert class_slug("\\App\\Models\\User") == "app/models/user"


@pytest.mark.parametrize("version,expected", [
    ("6.2.4", "6.2"),
    ("v8.83.27", "8.83"),
    ("10.1", "10.1"),
    ("7", "7"),
])
def test_short_version(version, expected):
    assert short_version(version) == expected


def test_root_segment():
    assert root_segment("\\App\\Models\\User") == "App"
    assert root_segment("Str") == "Str"


class TestLinkResolver:
    """Tests for internal and external link resolution."""

    def test_internal_link(self):
        resolver = LinkResolver(root_namespace="App")

        link = resolver.resolve(make_entity("App\\Http\\Controllers\\UserController"))

        assert link.internal is True
        assert link.slug == "app/http/controllers/user-controller"
        assert link.target == "/app/http/controllers/user-controller.html"
        assert link.markdown() == (
            "[App\\Http\\Controllers\\UserController]"
            "(/app/http/controllers/user-controller.html)"
        )

    def test_external_link_uses_major_minor_version(self):
        resolver = LinkResolver(
            root_namespace="App",
            external_base_url="https://laravel.com/api/",
            framework_version="6.2.4",
        )

        link = resolver.resolve(make_entity("Illuminate\\Database\\Eloquent\\Model", kind="external"))

        assert link.internal is False
        assert link.target == "https://laravel.com/api/6.2/Illuminate/Database/Eloquent/Model.html"

    def test_root_match_is_exact_segment(self):
        resolver = LinkResolver(root_namespace="App")

        link = resolver.resolve(make_entity("Application\\Thing"))

        assert link.internal is False

    def test_custom_root_namespace(self):
        resolver = LinkResolver(root_namespace="Acme")

        assert resolver.resolve(make_entity("Acme\\Billing\\Invoice")).internal is True
        assert resolver.resolve(make_entity("App\\Billing\\Invoice")).internal is False

    def test_resolve_many_preserves_order_without_dedup(self):
        resolver = LinkResolver(framework_version="6.0")
        b = make_entity("App\\B")
        a = make_entity("App\\A")

        text = resolver.resolve_many([b, a, b])

        assert text == "[App\\B](/app/b.html), [App\\A](/app/a.html), [App\\B](/app/b.html)"

    def test_resolve_many_empty(self):
        assert LinkResolver().resolve_many([]) == ""

    def test_slug_for(self):
        resolver = LinkResolver()

        assert resolver.slug_for(make_entity("App\\Models\\BlogPost")) == "app/models/blog-post"
        assert resolver.slug_for(make_entity("Illuminate\\Support\\Str")) == "Illuminate/Support/Str"
