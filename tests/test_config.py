import pytest
from pathlib import Path

from pydantic import ValidationError

from svcsetup_core.config import DEFAULT_CONFIG_PATHS, SetupSettings, load_settings
from svcsetup_core.core.errors import SetupError


def test_default_settings():
    settings = SetupSettings()
    assert settings.daemon == "pmtr"
    assert settings.placeholder == "__SYSBINDIR__"
    assert settings.bindir_candidates == ["/bin", "/usr/bin", "/sbin", "/usr/sbin", "/usr/local/bin"]


def test_default_template_dir_is_beside_package():
    template_dir = SetupSettings().resolve_template_dir()
    assert template_dir.name == "initscripts"
    assert template_dir.is_absolute()
    assert (template_dir.parent / "config.py").is_file()


def test_load_settings_without_files():
    assert load_settings() == SetupSettings()


def test_load_settings_from_env(monkeypatch, tmp_path):
    path = tmp_path / "setup.yaml"
    path.write_text("daemon: otherd\nbindir_candidates:\n  - /opt/bin\n")
    monkeypatch.setenv("PMTR_SETUP_CONFIG", str(path))

    settings = load_settings()
    assert settings.daemon == "otherd"
    assert settings.bindir_candidates == ["/opt/bin"]
    assert settings.placeholder == "__SYSBINDIR__"


def test_load_settings_from_default_path(tmp_path):
    path = tmp_path / "pmtr-setup.yaml"
    path.write_text("template_dir: /srv/templates\n")
    settings = load_settings(default_paths=[tmp_path / "missing.yaml", path])
    assert settings.resolve_template_dir() == Path("/srv/templates")


def test_malformed_settings(monkeypatch, tmp_path):
    path = tmp_path / "setup.yaml"
    path.write_text("daemon: [unterminated\n")
    monkeypatch.setenv("PMTR_SETUP_CONFIG", str(path))
    with pytest.raises(SetupError):
        load_settings()


def test_settings_must_be_mapping(monkeypatch, tmp_path):
    path = tmp_path / "setup.yaml"
    path.write_text("- just\n- a list\n")
    monkeypatch.setenv("PMTR_SETUP_CONFIG", str(path))
    with pytest.raises(SetupError):
        load_settings()


def test_invalid_settings_value(monkeypatch, tmp_path):
    path = tmp_path / "setup.yaml"
    path.write_text("bindir_candidates: 12\n")
    monkeypatch.setenv("PMTR_SETUP_CONFIG", str(path))
    with pytest.raises(SetupError):
        load_settings()


def test_default_paths_are_absolute():
    assert DEFAULT_CONFIG_PATHS
    assert all(p.is_absolute() for p in DEFAULT_CONFIG_PATHS)


def test_working_directory_settings_ignored(monkeypatch, tmp_path):
    (tmp_path / "pmtr-setup.yaml").write_text("template_dir: /tmp/elsewhere\ndaemon: otherd\n")
    monkeypatch.chdir(tmp_path)
    settings = load_settings(default_paths=[p for p in DEFAULT_CONFIG_PATHS if not p.exists()])
    assert settings.template_dir is None
    assert settings.daemon == "pmtr"


def test_relative_template_dir_follows_settings_file(monkeypatch, tmp_path):
    conf_dir = tmp_path / "conf"
    conf_dir.mkdir()
    path = conf_dir / "setup.yaml"
    path.write_text("template_dir: templates\n")
    monkeypatch.setenv("PMTR_SETUP_CONFIG", str(path))
    monkeypatch.chdir(tmp_path)

    settings = load_settings()
    assert settings.resolve_template_dir() == conf_dir.resolve() / "templates"


def test_relative_template_dir_rejected():
    with pytest.raises(ValidationError):
        SetupSettings(template_dir="templates")


def test_empty_placeholder_rejected(monkeypatch, tmp_path):
    with pytest.raises(ValidationError):
        SetupSettings(placeholder="")

    path = tmp_path / "setup.yaml"
    path.write_text("placeholder: ''\n")
    monkeypatch.setenv("PMTR_SETUP_CONFIG", str(path))
    with pytest.raises(SetupError):
        load_settings()
