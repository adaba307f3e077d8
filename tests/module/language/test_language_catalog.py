import pytest

from base.BaseLanguage import BaseLanguage
from module.Language.LanguageCatalog import LanguageCatalog


class TestLanguageCatalog:
    def test_default_is_first_entry(self) -> None:
        assert LanguageCatalog(["fr", "en"]).default_language() == "fr"

    def test_all_keeps_insertion_order(self) -> None:
        assert LanguageCatalog(["en", "es", "fr"]).all() == ("en", "es", "fr")

    def test_duplicates_keep_first_position(self) -> None:
        assert LanguageCatalog(["en", "es", "en", "fr"]).all() == ("en", "es", "fr")

    def test_empty_catalog_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            LanguageCatalog([])

    @pytest.mark.parametrize(
        ("language", "expected"),
        [("en", True), ("fr", True), ("EN", False), ("de", False), ("", False), (None, False)],
    )
    def test_is_supported(self, language: object, expected: bool) -> None:
        catalog = LanguageCatalog(["en", "es", "fr"])

        assert catalog.is_supported(language) is expected
        assert (language in catalog) is expected

    def test_from_base_language_matches_build_list(self) -> None:
        catalog = LanguageCatalog.from_base_language()

        assert catalog.all() == ("en", "es", "fr")
        assert catalog.default_language() == BaseLanguage.Enum.EN

    def test_get_name_uses_native_name_and_falls_back_to_code(self) -> None:
        catalog = LanguageCatalog(["en", "es", "xx"])

        assert catalog.get_name("es") == "Español"
        assert catalog.get_name("xx") == "xx"

    def test_iter_and_len(self) -> None:
        catalog = LanguageCatalog(["en", "es"])

        assert list(catalog) == ["en", "es"]
        assert len(catalog) == 2
