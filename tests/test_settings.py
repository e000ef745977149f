from pathlib import Path

from Settings import DEFAULT_HISTORY_FILE, HISTORY_FILE_ENV, Settings


def test_defaults():
    settings = Settings()
    assert settings.history_file == Path(DEFAULT_HISTORY_FILE)
    assert settings.result_decimals == 4
    assert settings.history_banner == "Conversion History:"
    assert settings.invalid_input_text == "Invalid Input"


def test_from_env_without_override(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(HISTORY_FILE_ENV, raising=False)
    assert Settings.from_env().history_file == Path(DEFAULT_HISTORY_FILE)


def test_from_env_override(monkeypatch, tmp_path):
    target = tmp_path / "custom.txt"
    monkeypatch.setenv(HISTORY_FILE_ENV, str(target))
    assert Settings.from_env().history_file == target
