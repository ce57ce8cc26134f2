from enum import IntEnum

import pytest

from arcext.localization import Localization
from arcext.singleton import get_manager
from arcext.structs import GwLanguage


class Texts(IntEnum):
    HELLO = 0
    BYE = 1


@pytest.fixture
def loc():
    loc = Localization()
    loc.load(GwLanguage.ENG, ["Hello", "Bye"])
    loc.load(GwLanguage.GEM, ["Hallo", "Tschuess"])
    return loc


@pytest.fixture(autouse=True)
def clean_manager():
    get_manager().shutdown()
    yield
    get_manager().shutdown()


def test_default_language_is_english(loc):
    assert loc.current_language == GwLanguage.ENG
    assert loc.translate(0) == "Hello"


def test_enum_ids(loc):
    assert loc.translate(Texts.BYE) == "Bye"


def test_change_language(loc):
    loc.change_language(GwLanguage.GEM)
    assert loc.current_language == GwLanguage.GEM
    assert loc.translate(Texts.HELLO) == "Hallo"


def test_missing_translation_raises(loc):
    with pytest.raises(IndexError):
        loc.translate(2)
    with pytest.raises(IndexError):
        loc.translate(-1)


def test_empty_language_has_no_texts(loc):
    loc.change_language(GwLanguage.FRE)
    with pytest.raises(IndexError):
        loc.translate(0)


def test_invalid_language_raises(loc):
    with pytest.raises(IndexError):
        loc.change_language(6)
    with pytest.raises(IndexError):
        loc.add_translation(-1, "x")
    assert loc.current_language == GwLanguage.ENG


def test_override_translation(loc):
    loc.override_translation(GwLanguage.ENG, Texts.BYE, "Goodbye")
    assert loc.translate(1) == "Goodbye"
    loc.change_language(GwLanguage.GEM)
    assert loc.translate(1) == "Tschuess"


def test_override_missing_raises(loc):
    with pytest.raises(IndexError):
        loc.override_translation(GwLanguage.SPA, 0, "Hola")


def test_bytes_are_decoded(loc):
    loc.add_translation(GwLanguage.ENG, "Grüße".encode("utf-8"))
    assert loc.translate(2) == "Grüße"


def test_global_instance():
    Localization.instance().add_translation(GwLanguage.ENG, "Apply")
    Localization.instance().add_translation(GwLanguage.SPA, "Aplicar")
    assert Localization.global_translate(0) == "Apply"
    Localization.change_global_language(GwLanguage.SPA)
    assert Localization.global_translate(0) == "Aplicar"