"""Tests for locale tags, aggregation and resolution."""

from itertools import combinations

import pytest

from desktop_entry.core.locale import (
    LocaleTag,
    aggregate,
    build_locale_string,
    build_locale_string_list,
    lookup,
    resolve,
    system_locales,
)
from desktop_entry.exceptions import EntrySyntaxError
from desktop_entry.models import LocaleString, LocaleStringList

PRECEDENCE = ["sr_RS@latin", "sr_RS", "sr@latin", "sr"]


class TestLocaleTag:
    """Tests for LocaleTag parsing."""

    def test_full_tag(self) -> None:
        tag = LocaleTag.parse("de_DE.UTF-8@euro")

        assert tag == LocaleTag("de", "DE", "UTF-8", "euro")
        assert tag.without_encoding() == "de_DE@euro"

    def test_language_only(self) -> None:
        assert LocaleTag.parse("fr") == LocaleTag("fr")

    @pytest.mark.parametrize(
        "text", ["", "_DE", "@euro", "de-DE", "de_DE@", "de DE"]
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError, match="invalid locale tag"):
            LocaleTag.parse(text)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("sr_RS@latin", PRECEDENCE),
            ("sr_RS", ["sr_RS", "sr"]),
            ("sr@latin", ["sr@latin", "sr"]),
            ("sr", ["sr"]),
            ("sr_RS.UTF-8@latin", PRECEDENCE),
        ],
    )
    def test_candidates(self, text: str, expected: list[str]) -> None:
        assert LocaleTag.parse(text).candidates() == expected


def _all_subsets(items: list[str]) -> list[tuple[str, ...]]:
    return [
        subset
        for size in range(len(items) + 1)
        for subset in combinations(items, size)
    ]


class TestResolvePrecedence:
    """The fallback chain is a total order over the stored variants."""

    @pytest.mark.parametrize("present", _all_subsets(PRECEDENCE))
    @pytest.mark.parametrize(
        "requested", ["sr_RS@latin", "sr_RS", "sr@latin", "sr"]
    )
    def test_first_present_candidate_wins(
        self, requested: str, present: tuple[str, ...]
    ) -> None:
        value = LocaleString(
            default="default", variants={tag: tag for tag in present}
        )
        candidates = LocaleTag.parse(requested).candidates()
        expected = next(
            (tag for tag in candidates if tag in present), "default"
        )

        assert resolve(value, requested) == expected

    def test_country_never_matches_without_request(self) -> None:
        value = LocaleString("default", {"sr_RS": "country"})

        assert resolve(value, "sr@latin") == "default"


class TestResolve:
    """Tests for resolve and lookup."""

    def test_encoding_is_ignored_on_request(self) -> None:
        value = LocaleString("Firefox", {"de_DE": "Feuerfuchs"})

        assert resolve(value, "de_DE.UTF-8") == "Feuerfuchs"

    def test_encoding_is_ignored_on_stored_tags(self) -> None:
        value = LocaleString("Firefox", {"de_DE.ISO-8859-1": "Feuerfuchs"})

        assert resolve(value, "de_DE") == "Feuerfuchs"

    def test_exact_tag_preferred_over_encoding_variant(self) -> None:
        value = LocaleString("x", {"de.UTF-8": "encoded", "de": "plain"})

        assert resolve(value, "de") == "plain"

    def test_preference_list_in_order(self) -> None:
        value = LocaleString("default", {"fr": "French", "de": "German"})

        assert resolve(value, ["it", "de", "fr"]) == "German"

    @pytest.mark.parametrize("neutral", ["C", "POSIX", "C.UTF-8"])
    def test_neutral_locale_selects_default(self, neutral: str) -> None:
        value = LocaleString("default", {"de": "German"})

        assert resolve(value, [neutral, "de"]) == "default"

    def test_unparsable_preference_is_skipped(self) -> None:
        value = LocaleString("default", {"de": "German"})

        assert resolve(value, ["not a locale", "de"]) == "German"

    def test_none_reads_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        for name in ("LANGUAGE", "LC_ALL", "LC_MESSAGES"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("LANG", "de_AT.UTF-8")
        value = LocaleString("default", {"de": "German"})

        assert resolve(value) == "German"
        assert value.resolve() == "German"

    def test_locale_string_list(self) -> None:
        value = LocaleStringList(("a", "b"), {"de": ("x",)})

        assert resolve(value, "de_DE") == ("x",)
        assert value.resolve("fr") == ("a", "b")

    def test_lookup_without_variants(self) -> None:
        assert lookup({}, "de") is None


class TestSystemLocales:
    """Tests for reading the locale environment."""

    def test_language_list_wins(self) -> None:
        environ = {"LANGUAGE": "de:fr::en", "LANG": "it_IT.UTF-8"}

        assert system_locales(environ) == ["de", "fr", "en"]

    def test_first_non_empty_variable(self) -> None:
        environ = {"LANGUAGE": "", "LC_ALL": "", "LC_MESSAGES": "pt_BR"}

        assert system_locales(environ) == ["pt_BR"]

    def test_empty_environment(self) -> None:
        assert system_locales({}) == []


class TestAggregate:
    """Tests for collecting localized occurrences."""

    def test_default_and_variants(self) -> None:
        default, variants = aggregate(
            "Name", [(None, "App", 2), ("de", "Anwendung", 3)]
        )

        assert default == "App"
        assert variants == {"de": "Anwendung"}

    def test_invalid_tag_aborts(self) -> None:
        with pytest.raises(EntrySyntaxError) as exc_info:
            aggregate(
                "Name", [("de-DE", "Anwendung", 4)], group="Desktop Entry"
            )

        assert exc_info.value.line == 4
        assert exc_info.value.group == "Desktop Entry"
        assert "Name" in str(exc_info.value)

    def test_only_tagged_occurrences_give_empty_default(self) -> None:
        value = build_locale_string("Comment", [("de", "Kommentar", 1)])

        assert value == LocaleString("", {"de": "Kommentar"})

    def test_list_aggregation(self) -> None:
        value = build_locale_string_list(
            "Keywords", [(None, ("a",), 1), ("de", ("b", "c"), 2)]
        )

        assert value == LocaleStringList(("a",), {"de": ("b", "c")})
