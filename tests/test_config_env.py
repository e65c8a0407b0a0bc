"""Tests for layered dotenv loading."""

import os
from pathlib import Path

from loading_dock.core.config.env import get_user_env_path, load_layered_env


class TestUserEnvPath:
    def test_honors_xdg_config_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_user_env_path() == tmp_path / "loading-dock" / ".env"

    def test_defaults_to_dot_config(self, tmp_path, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert get_user_env_path() == tmp_path / ".config" / "loading-dock" / ".env"


class TestLoadLayeredEnv:
    def test_project_env_overrides_user_env(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LDOCK_CONFIG", raising=False)
        user_env = tmp_path / "user.env"
        user_env.write_text("LDOCK_CONFIG=/from/user\n")
        project_env = tmp_path / ".env"
        project_env.write_text("LDOCK_CONFIG=/from/project\n")

        load_layered_env(user_env_paths=[user_env], project_env_paths=[project_env])

        assert os.environ["LDOCK_CONFIG"] == "/from/project"

    def test_user_env_used_when_project_silent(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LDOCK_CONFIG", raising=False)
        user_env = tmp_path / "user.env"
        user_env.write_text("LDOCK_CONFIG=/from/user\n")

        load_layered_env(user_env_paths=[user_env], project_env_paths=[tmp_path / "none"])

        assert os.environ["LDOCK_CONFIG"] == "/from/user"

    def test_shell_env_never_overridden(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LDOCK_CONFIG", "/from/shell")
        user_env = tmp_path / "user.env"
        user_env.write_text("LDOCK_CONFIG=/from/user\n")
        project_env = tmp_path / ".env"
        project_env.write_text("LDOCK_CONFIG=/from/project\n")

        load_layered_env(user_env_paths=[user_env], project_env_paths=[project_env])

        assert os.environ["LDOCK_CONFIG"] == "/from/shell"

    def test_default_project_paths(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LDOCK_CONFIG", raising=False)
        (tmp_path / ".env.local").write_text("LDOCK_CONFIG=/from/local\n")

        load_layered_env(project_dir=tmp_path, user_env_paths=[])

        assert os.environ["LDOCK_CONFIG"] == "/from/local"

    def test_missing_files_are_ignored(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LDOCK_CONFIG", raising=False)

        load_layered_env(
            user_env_paths=[tmp_path / "nope"],
            project_env_paths=[tmp_path / "also-nope"],
        )

        assert "LDOCK_CONFIG" not in os.environ

    def test_no_home_directory(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LDOCK_CONFIG", raising=False)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        def _no_home(cls):
            raise RuntimeError("no home")

        monkeypatch.setattr(Path, "home", classmethod(_no_home))
        (tmp_path / ".env").write_text("LDOCK_CONFIG=/from/project\n")

        load_layered_env(project_dir=tmp_path)

        assert os.environ["LDOCK_CONFIG"] == "/from/project"

    def test_local_overrides_project_env(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LDOCK_CONFIG", raising=False)
        (tmp_path / ".env").write_text("LDOCK_CONFIG=/from/project\n")
        (tmp_path / ".env.local").write_text("LDOCK_CONFIG=/from/local\n")

        load_layered_env(project_dir=tmp_path, user_env_paths=[])

        assert os.environ["LDOCK_CONFIG"] == "/from/local"

    def test_other_keys_ignored(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LDOCK_CONFIG", raising=False)
        monkeypatch.delenv("OTHER_VAR", raising=False)
        project_env = tmp_path / ".env"
        project_env.write_text("OTHER_VAR=from-project\nLDOCK_CONFIG=/from/project\n")

        load_layered_env(user_env_paths=[], project_env_paths=[project_env])

        assert "OTHER_VAR" not in os.environ
        assert os.environ["LDOCK_CONFIG"] == "/from/project"
