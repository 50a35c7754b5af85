from pathlib import Path

from pytest import raises

from termdeck.configuring.settings import Settings
from termdeck.exceptions import ReadError, SettingsError
from termdeck.models.layout import Alignment
from termdeck.reading import read_deck
from termdeck.utils import read_text


def test_missing_settings_file(tmp_path: Path) -> None:
    assert Settings.from_yaml(tmp_path) == Settings()


def test_empty_settings_file(tmp_path: Path) -> None:
    (tmp_path / "termdeck.yml").write_text("", encoding="utf8")
    assert Settings.from_yaml(tmp_path) == Settings()


def test_settings_file(tmp_path: Path) -> None:
    (tmp_path / "termdeck.yml").write_text(
        "color: never\nwatch: true\nwatch_delay: 0.5\n", encoding="utf8"
    )
    assert Settings.from_yaml(tmp_path) == Settings(
        color="never", watch=True, watch_delay=0.5
    )


def test_invalid_settings(tmp_path: Path) -> None:
    (tmp_path / "termdeck.yml").write_text("color: sometimes\n", encoding="utf8")
    with raises(SettingsError, match="invalid settings"):
        Settings.from_yaml(tmp_path)


def test_invalid_settings_yaml(tmp_path: Path) -> None:
    (tmp_path / "termdeck.yml").write_text("color: [never\n", encoding="utf8")
    with raises(SettingsError, match="invalid YAML"):
        Settings.from_yaml(tmp_path)


def test_overrides() -> None:
    settings = Settings(color="never").with_overrides(color=None, watch=True)
    assert settings == Settings(color="never", watch=True)


def test_read_deck(tmp_path: Path) -> None:
    path = tmp_path / "slides.md"
    path.write_text("align: center\n---\n# A\n--- {align: right}\n# B\n", "utf8")
    deck = read_deck(path)
    assert len(deck) == 2
    assert deck.config.align == Alignment("center", "center")
    assert deck.slides[1].config.align == Alignment("right", "center")


def test_read_without_path() -> None:
    with raises(ReadError, match="the location for the slides must be given"):
        read_text(None)


def test_read_missing_file(tmp_path: Path) -> None:
    with raises(ReadError, match="cannot read"):
        read_text(tmp_path / "missing.md")


def test_read_invalid_encoding(tmp_path: Path) -> None:
    path = tmp_path / "slides.md"
    path.write_bytes(b"\xff\xfe\x00")
    with raises(ReadError, match="cannot read"):
        read_text(path)
