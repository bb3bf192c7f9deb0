from pathlib import Path

from rollingbuffer.config import DemoSettings, GeneralSettings, Settings, load_config


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    """Tests that a missing config file yields default settings."""
    path = tmp_path / "absent.toml"
    settings = load_config(path)
    assert settings == Settings()
    assert settings.demo.capacity == 20
    assert settings.demo.samples == 40
    # Loading never creates the file.
    assert not path.exists()


def test_overrides_are_merged(tmp_path: Path) -> None:
    """Tests that values from the file override only the given fields."""
    path = tmp_path / "config.toml"
    path.write_text(
        '[general]\nlog_level_console = "DEBUG"\n\n[demo]\ncapacity = 8\n',
        encoding="utf-8",
    )
    settings = load_config(path)
    assert settings.general == GeneralSettings(log_level_console="DEBUG")
    assert settings.demo == DemoSettings(capacity=8)


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    """Tests that unrecognized sections and keys do not break loading."""
    path = tmp_path / "config.toml"
    path.write_text(
        "[demo]\nsamples = 5\ncolour = 'red'\n\n[plot]\nwidth = 3\n",
        encoding="utf-8",
    )
    settings = load_config(path)
    assert settings.demo.samples == 5
    assert not hasattr(settings.demo, "colour")


def test_non_table_section_is_skipped(
    tmp_path: Path, log_messages: list[str]
) -> None:
    """Tests that a scalar where a section is expected is skipped with a warning."""
    path = tmp_path / "config.toml"
    path.write_text("demo = 3\n", encoding="utf-8")
    settings = load_config(path)
    assert settings.demo == DemoSettings()
    assert any(m.startswith("WARNING|") for m in log_messages)


def test_invalid_utf8_falls_back_to_defaults(
    tmp_path: Path, log_messages: list[str]
) -> None:
    """Tests that a file that is not valid UTF-8 is logged and defaults are used."""
    path = tmp_path / "config.toml"
    path.write_bytes(b"[demo]\ncapacity = 3\n# \xff\xfe bad\n")
    settings = load_config(path)
    assert settings == Settings()
    assert any(m.startswith("ERROR|") for m in log_messages)


def test_mistyped_values_are_skipped(
    tmp_path: Path, log_messages: list[str]
) -> None:
    """Tests that values of the wrong type keep the default with a warning."""
    path = tmp_path / "config.toml"
    path.write_text(
        '[general]\nlog_directory = "/tmp/logs"\n\n'
        '[demo]\ncapacity = true\nsamples = "x"\nshow_lazy = 1\n',
        encoding="utf-8",
    )
    settings = load_config(path)
    assert settings.demo == DemoSettings()
    assert settings.general.log_directory == "/tmp/logs"
    warnings = [m for m in log_messages if m.startswith("WARNING|")]
    assert len(warnings) == 3


def test_invalid_toml_falls_back_to_defaults(
    tmp_path: Path, log_messages: list[str]
) -> None:
    """Tests that a malformed file is logged and the defaults are used."""
    path = tmp_path / "config.toml"
    path.write_text("[demo\ncapacity = = 3\n", encoding="utf-8")
    settings = load_config(path)
    assert settings == Settings()
    assert any(
        m.startswith("ERROR|") and "Error decoding TOML" in m for m in log_messages
    )
