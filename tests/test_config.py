import pytest

from mdpress.config import CodeConfig, Playground, RustEdition


@pytest.mark.parametrize(
    ("edition", "expected"),
    [
        (RustEdition.E2015, "edition2015"),
        (RustEdition.E2018, "edition2018"),
        (RustEdition.E2021, "edition2021"),
    ],
)
def test_css_class(edition, expected):
    assert edition.css_class() == expected


def test_edition_from_year():
    assert RustEdition("2018") is RustEdition.E2018


def test_unknown_edition_rejected():
    with pytest.raises(ValueError):
        RustEdition("1999")


def test_playground_default_is_runnable_and_not_editable():
    playground = Playground()
    assert playground.runnable is True
    assert playground.editable is False


def test_playground_override_keeps_other_defaults():
    playground = Playground(editable=True)
    assert playground.editable is True
    assert playground.runnable == Playground().runnable
    assert playground.copy_js == Playground().copy_js


def test_code_config_hidelines_not_shared():
    first = CodeConfig()
    first.hidelines["python"] = "~"
    assert CodeConfig().hidelines == {}
    assert first.hidelines == {"python": "~"}