from pathlib import Path

import pytest

from nanoedit.components.configuration.configuration import Configuration


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    (tmp_path / "development.yaml").write_text(
        "MODEL_NAME: gemini-2.5-flash-image\n"
        "LOG_LEVEL: DEBUG\n"
        "MAX_SIDE: 1024\n"
        "VERBOSE: 'yes'\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("MODEL_NAME", "LOG_LEVEL", "MAX_SIDE", "VERBOSE", "MISSING_KEY"):
        monkeypatch.delenv(key, raising=False)


def test_reads_values_from_yaml(config_dir: Path) -> None:
    configuration = Configuration("development", str(config_dir))

    assert configuration.get_configuration("MODEL_NAME", str) == "gemini-2.5-flash-image"
    assert configuration.get_configuration("MAX_SIDE", int) == 1024


def test_environment_overrides_yaml(
    config_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("MODEL_NAME", "gemini-3-pro-image-preview")
    monkeypatch.setenv("MAX_SIDE", "512")

    configuration = Configuration("development", str(config_dir))

    assert (
        configuration.get_configuration("MODEL_NAME", str)
        == "gemini-3-pro-image-preview"
    )
    assert configuration.get_configuration("MAX_SIDE", int) == 512


def test_returns_default_when_missing(config_dir: Path) -> None:
    configuration = Configuration("development", str(config_dir))

    assert configuration.get_configuration("MISSING_KEY", str, default="x") == "x"
    assert configuration.get_configuration("MISSING_KEY", str, default=None) is None


def test_missing_without_default_raises(config_dir: Path) -> None:
    configuration = Configuration("development", str(config_dir))

    with pytest.raises(ValueError) as exc_info:
        configuration.get_configuration("MISSING_KEY", str)

    assert "MISSING_KEY" in str(exc_info.value)


def test_converts_booleans(config_dir: Path) -> None:
    configuration = Configuration("development", str(config_dir))

    assert configuration.get_configuration("VERBOSE", bool) is True


def test_invalid_conversion_raises(config_dir: Path) -> None:
    configuration = Configuration("development", str(config_dir))

    with pytest.raises(ValueError):
        configuration.get_configuration("MODEL_NAME", int)


def test_missing_file_falls_back_to_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("MODEL_NAME", "from-env")

    configuration = Configuration("staging", str(tmp_path))

    assert configuration.get_configuration("MODEL_NAME", str) == "from-env"


def test_non_mapping_file_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "production.yaml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        Configuration("production", str(tmp_path))
