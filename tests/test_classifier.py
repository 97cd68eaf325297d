import pytest

from classdoc.classifier import classify, visibility_of
from classdoc.models import Modifier

from conftest import make_method


def test_plain_public_is_tip():
    result = classify(make_method("handle"))

    assert result.label == "public"
    assert result.severity == "tip"
    assert result.is_static is False


@pytest.mark.parametrize("modifiers,label", [
    (Modifier.PROTECTED, "protected"),
    (Modifier.PRIVATE, "private"),
    (Modifier.PUBLIC | Modifier.ABSTRACT, "abstract"),
    (Modifier.PUBLIC | Modifier.FINAL, "final"),
])
def test_non_public_labels_are_warnings(modifiers, label):
    result = classify(make_method("m", modifiers))

    assert result.label == label
    assert result.severity == "warning"


def test_protected_abstract_classifies_as_protected():
    result = classify(make_method("m", Modifier.PROTECTED | Modifier.ABSTRACT))

    assert result.label == "protected"


def test_private_final_classifies_as_private():
    result = classify(make_method("m", Modifier.PRIVATE | Modifier.FINAL))

    assert result.label == "private"


def test_abstract_wins_over_final():
    result = classify(make_method("m", Modifier.ABSTRACT | Modifier.FINAL))

    assert result.label == "abstract"


def test_static_is_appended():
    result = classify(make_method("make", Modifier.PUBLIC | Modifier.STATIC))

    assert result.label == "public static"
    assert result.severity == "tip"
    assert result.is_static is True


def test_protected_static():
    result = classify(make_method("boot", Modifier.PROTECTED | Modifier.STATIC))

    assert result.label == "protected static"
    assert result.severity == "warning"


def test_strict_mode_keeps_every_modifier():
    member = make_method("m", Modifier.PROTECTED | Modifier.ABSTRACT | Modifier.STATIC)

    result = classify(member, "strict")

    assert result.label == "abstract protected static"
    assert result.severity == "warning"


def test_strict_mode_plain_public():
    result = classify(make_method("m"), "strict")

    assert result.label == "public"
    assert result.severity == "tip"


def test_strict_mode_final_public_is_warning():
    result = classify(make_method("m", Modifier.PUBLIC | Modifier.FINAL), "strict")

    assert result.label == "final public"
    assert result.severity == "warning"


def test_unknown_mode_raises():
    with pytest.raises(ValueError) as exc_info:
        classify(make_method("m"), "loose")

    assert "loose" in str(exc_info.value)


def test_visibility_of_defaults_to_public():
    assert visibility_of(Modifier.STATIC) == "public"
    assert visibility_of(Modifier.PRIVATE | Modifier.STATIC) == "private"
