"""Tests for the command-line entry point."""

from pathlib import Path

from click.testing import CliRunner

from main import main


def _config_dir(tmp_path: Path) -> Path:
    roster = tmp_path / "roster.yaml"
    roster.write_text(
        "- id: u1\n"
        "  username: quick\n"
        "  stories:\n"
        "    - {id: i1, url: 'm://1', timestamp: now}\n"
        "    - {id: i2, url: 'm://2', timestamp: now}\n",
        encoding="utf-8",
    )
    (tmp_path / "settings.yaml").write_text(
        "playback:\n"
        "  tick_interval_ms: 5\n"
        "  default_duration_ms: 20\n"
        "roster:\n"
        f"  file: '{roster}'\n"
        "storage:\n"
        f"  preferences_file: '{tmp_path / 'prefs.json'}'\n",
        encoding="utf-8",
    )
    return tmp_path


def test_requires_an_action():
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 1
    assert "Specify --list" in result.output


def test_list_bundled_roster():
    result = CliRunner().invoke(main, ["--list"])
    assert result.exit_code == 0
    assert "alex_photo (2 stories)" in result.output
    assert "maria.design (1 story)" in result.output


def test_open_plays_until_closed(tmp_path: Path):
    cfg_dir = _config_dir(tmp_path)
    result = CliRunner().invoke(main, ["--config-dir", str(cfg_dir), "--open", "0"])
    assert result.exit_code == 0, result.output
    assert "quick" in result.output
    assert "Stories closed." in result.output


def test_scripted_close(tmp_path: Path):
    cfg_dir = _config_dir(tmp_path)
    result = CliRunner().invoke(
        main,
        ["--config-dir", str(cfg_dir), "--open", "0", "-i", "pause_begin", "-i", "close", "--intent-delay", "0.01"],
    )
    assert result.exit_code == 0, result.output
    assert "[paused]" in result.output
    assert "Stories closed." in result.output


def test_open_out_of_range(tmp_path: Path):
    cfg_dir = _config_dir(tmp_path)
    result = CliRunner().invoke(main, ["--config-dir", str(cfg_dir), "--open", "5"])
    assert result.exit_code == 1
    assert "Invalid story position" in result.output


def test_theme_is_persisted(tmp_path: Path):
    cfg_dir = _config_dir(tmp_path)
    result = CliRunner().invoke(main, ["--config-dir", str(cfg_dir), "--theme", "dark"])
    assert result.exit_code == 0
    assert '"dark"' in (tmp_path / "prefs.json").read_text(encoding="utf-8")


def test_malformed_roster_is_reported(tmp_path: Path):
    cfg_dir = _config_dir(tmp_path)
    (tmp_path / "roster.yaml").write_text("- just_a_string\n", encoding="utf-8")
    result = CliRunner().invoke(main, ["--config-dir", str(cfg_dir), "--list"])
    assert result.exit_code == 1
    assert "must be a mapping" in result.output
