"""Tests for the serializer."""

from dataclasses import replace

import pytest

from desktop_entry import parse, serialize
from desktop_entry.exceptions import ValueEncodeError
from desktop_entry.models import (
    ApplicationFields,
    DesktopAction,
    DesktopEntry,
    DesktopFile,
    LocaleString,
    RawGroup,
)


def test_firefox_output(firefox_text: str) -> None:
    assert serialize(parse(firefox_text)) == (
        "[Desktop Entry]\n"
        "Type=Application\n"
        "Name=Firefox\n"
        "Name[de]=Feuerfuchs\n"
        "Exec=firefox %u\n"
        "Categories=Network;WebBrowser;\n"
    )


def test_known_keys_use_fixed_order() -> None:
    text = (
        "[Desktop Entry]\n"
        "Exec=app\n"
        "X-Custom=1\n"
        "Name[fr]=Appli\n"
        "Terminal=true\n"
        "Name=App\n"
        "Name[de]=Anwendung\n"
        "Type=Application\n"
        "Version=1.0\n"
    )

    assert serialize(parse(text)) == (
        "[Desktop Entry]\n"
        "Type=Application\n"
        "Version=1.0\n"
        "Name=App\n"
        "Name[de]=Anwendung\n"
        "Name[fr]=Appli\n"
        "Exec=app\n"
        "Terminal=true\n"
        "X-Custom=1\n"
    )


def test_actions_and_groups(full_text: str) -> None:
    output = serialize(parse(full_text))

    assert "Actions=new-window;preferences;\n" in output
    assert output.index("[Desktop Action new-window]") < output.index(
        "[Desktop Action preferences]"
    )
    assert output.endswith(
        "\n\n[X-Vendor Data]\nKey=value\nOther[de]=Wert\n"
    )
    assert "X-Vendor-Note=keep\\smy spacing\n" in output
    assert "\n\n\n" not in output


def test_constructed_model_is_escaped() -> None:
    desktop_file = DesktopFile(
        entry=DesktopEntry(
            name=LocaleString(" Padded", {"de": "Zeile\nZwei"}),
            entry_type=ApplicationFields(
                exec="run",
                categories=("A;B", "C"),
                terminal=False,
            ),
        ),
        actions={
            "go": DesktopAction(identifier="go", name=LocaleString("Go"))
        },
        extra_groups={"X-Empty": RawGroup()},
    )

    assert serialize(desktop_file) == (
        "[Desktop Entry]\n"
        "Type=Application\n"
        "Name=\\sPadded\n"
        "Name[de]=Zeile\\nZwei\n"
        "Exec=run\n"
        "Terminal=false\n"
        "Actions=go;\n"
        "Categories=A\\;B;C;\n"
        "\n"
        "[Desktop Action go]\n"
        "Name=Go\n"
        "\n"
        "[X-Empty]\n"
    )


def test_output_is_deterministic(full_text: str) -> None:
    assert serialize(parse(full_text)) == serialize(parse(full_text))


class TestRoundTrip:
    """Serializing then re-parsing yields an equal model."""

    @pytest.mark.parametrize(
        "text",
        [
            "[Desktop Entry]\nType=Directory\nName[de]=Spiele\n",
            "[Desktop Entry]\nType=Link\nName=L\nURL=https://a.example\n",
            (
                "[Desktop Entry]\nType=Application\nName=A\n"
                "Comment=\\s\\slead and trail\\s\n"
                "Exec=sh -c \"echo a\\\\\\\\b\"\n"
                "Categories=;\n"
                "OnlyShowIn=GNOME;KDE;\n"
                "Icon[de]=tagged\n"
                "URL=foreign\n"
                "[Desktop Action unused]\nName=U\n"
            ),
        ],
    )
    def test_round_trip(self, text: str) -> None:
        parsed = parse(text)

        assert parse(serialize(parsed)) == parsed

    def test_round_trip_full(self, full_text: str) -> None:
        parsed = parse(full_text)

        assert parse(serialize(parsed)) == parsed

    def test_round_trip_after_replace(self, firefox_text: str) -> None:
        parsed = parse(firefox_text)
        changed = replace(
            parsed,
            entry=replace(parsed.entry, comment=LocaleString("Browse")),
        )

        reparsed = parse(serialize(changed))

        assert reparsed.entry.comment == LocaleString("Browse")
        assert reparsed == changed


def test_unescapable_edge_whitespace_names_the_key() -> None:
    desktop_file = DesktopFile(
        entry=DesktopEntry(
            name=LocaleString("App"),
            comment=LocaleString("ok", {"de": "Notiz\u00a0"}),
            entry_type=ApplicationFields(),
        )
    )

    with pytest.raises(ValueEncodeError, match="Comment"):
        serialize(desktop_file)
