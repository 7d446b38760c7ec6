"""Tests for common.config module."""

import pytest

from common.config import (
    DEFAULT_API_URL,
    find_config_path,
    load_config,
)


@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / "prod.yaml").write_text(
        "remote:\n"
        "  base_url: https://cms.example.org\n"
        "  token: file-token\n"
        "  read_timeout: 9\n"
        "  deadline: 15\n"
        "site:\n"
        "  site_url: https://reviews.example.org/\n"
    )
    (tmp_path / "empty.yaml").write_text("")
    return tmp_path


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ("CONFIG_ENV", "CONTENT_API_URL", "CONTENT_API_TOKEN", "SITE_URL", "AFFILIATE_TAG"):
        monkeypatch.delenv(name, raising=False)


class TestFindConfigPath:
    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            find_config_path("nope", tmp_path)

    def test_env_var_selects_config(self, config_dir, monkeypatch) -> None:
        monkeypatch.setenv("CONFIG_ENV", "empty")
        path = find_config_path(None, config_dir, env_var="CONFIG_ENV")
        assert path.name == "empty.yaml"


class TestLoadConfig:
    def test_reads_file_values(self, config_dir) -> None:
        config = load_config("prod", config_dir)
        assert config.remote.base_url == "https://cms.example.org"
        assert config.remote.token == "file-token"
        assert config.remote.read_timeout == 9
        assert config.remote.deadline == 15
        assert config.site.site_url == "https://reviews.example.org/"

    def test_empty_file_uses_defaults(self, config_dir) -> None:
        config = load_config("empty", config_dir)
        assert config.remote.base_url == DEFAULT_API_URL
        assert config.remote.token == ""
        assert config.remote.limit == 100
        assert config.content.content_dir == str(config_dir.parent / "content")
        assert config.category_rules is None

    def test_env_overrides_file(self, config_dir, monkeypatch) -> None:
        monkeypatch.setenv("CONTENT_API_URL", "https://override.example.org")
        monkeypatch.setenv("CONTENT_API_TOKEN", "env-token")
        monkeypatch.setenv("AFFILIATE_TAG", "site-20")
        config = load_config("prod", config_dir)
        assert config.remote.base_url == "https://override.example.org"
        assert config.remote.token == "env-token"
        assert config.site.affiliate_tag == "site-20"


class TestRelativePaths:
    @pytest.fixture
    def repo_root(self, tmp_path, monkeypatch):
        configs = tmp_path / "repo" / "configs"
        configs.mkdir(parents=True)
        (configs / "local.yaml").write_text(
            "category_rules: configs/categories.yaml\n"
            "content:\n"
            "  content_dir: content\n"
        )
        (configs / "absolute.yaml").write_text(f"category_rules: {tmp_path / 'elsewhere' / 'rules.yaml'}\n")
        elsewhere = tmp_path / "cwd"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)
        return tmp_path / "repo"

    def test_resolved_against_repo_root_not_cwd(self, repo_root) -> None:
        config = load_config("local", repo_root / "configs")
        assert config.category_rules == str(repo_root / "configs" / "categories.yaml")
        assert config.content.content_dir == str(repo_root / "content")

    def test_absolute_path_unchanged(self, repo_root, tmp_path) -> None:
        config = load_config("absolute", repo_root / "configs")
        assert config.category_rules == str(tmp_path / "elsewhere" / "rules.yaml")
