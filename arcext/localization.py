"""Translated text looked up by numeric id in the current language."""

from __future__ import annotations

from typing import Iterable, SupportsInt

from arcext.singleton import Singleton
from arcext.structs import GwLanguage

_LANGUAGE_SLOTS = 6


class Localization(Singleton):
    """Per-language lists of texts, indexed by translation id.

    Texts are appended in the order they are loaded, so ids of later
    callers follow on from those already present.
    """

    def __init__(self) -> None:
        self._translations: list[list[str]] = [[] for _ in range(_LANGUAGE_SLOTS)]
        self._current_language: int = GwLanguage.ENG
        self._current = self._translations[GwLanguage.ENG]

    def _texts(self, language: SupportsInt) -> list[str]:
        slot = int(language)
        if not 0 <= slot < _LANGUAGE_SLOTS:
            raise IndexError(f"language {slot} is out of range")
        return self._translations[slot]

    @staticmethod
    def _checked_index(texts: list[str], translation_id: SupportsInt) -> int:
        index = int(translation_id)
        if not 0 <= index < len(texts):
            raise IndexError(f"translation {index} does not exist")
        return index

    def translate(self, translation_id: SupportsInt) -> str:
        """Text with ``translation_id`` in the current language."""
        return self._current[self._checked_index(self._current, translation_id)]

    def add_translation(self, language: SupportsInt, text: str | bytes) -> None:
        """Append ``text`` to the texts of ``language``."""
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        self._texts(language).append(str(text))

    def load(self, language: SupportsInt, texts: Iterable[str | bytes]) -> None:
        """Append every text of ``texts`` to ``language``."""
        for text in texts:
            self.add_translation(language, text)

    def change_language(self, language: SupportsInt) -> None:
        """Make ``language`` the one used by :meth:`translate`."""
        texts = self._texts(language)
        self._current_language = language
        self._current = texts

    def override_translation(
        self, language: SupportsInt, translation_id: SupportsInt, text: str
    ) -> None:
        """Replace an existing text of ``language``."""
        texts = self._texts(language)
        texts[self._checked_index(texts, translation_id)] = text

    @property
    def current_language(self) -> int:
        """The language in use."""
        return self._current_language

    @classmethod
    def global_translate(cls, translation_id: SupportsInt) -> str:
        """Translate with the shared instance."""
        return cls.instance().translate(translation_id)

    @classmethod
    def change_global_language(cls, language: SupportsInt) -> None:
        """Change the language of the shared instance."""
        cls.instance().change_language(language)