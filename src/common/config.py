"""Site configuration: YAML files under configs/ with environment overrides."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"

DEFAULT_API_URL = "https://data.beginos.org"
DEFAULT_SITE_URL = "https://example.com"


@dataclass
class RemoteConfig:
    base_url: str = DEFAULT_API_URL
    token: str = ""
    connect_timeout: float = 5.0
    read_timeout: float = 20.0
    limit: int = 100
    deadline: float | None = 60.0  # overall bound on the remote fetch, seconds


@dataclass
class ContentConfig:
    content_dir: str = "content"


@dataclass
class SiteConfig:
    site_url: str = DEFAULT_SITE_URL
    affiliate_tag: str | None = None


@dataclass
class Config:
    remote: RemoteConfig = field(default_factory=RemoteConfig)
    content: ContentConfig = field(default_factory=ContentConfig)
    site: SiteConfig = field(default_factory=SiteConfig)
    category_rules: str | None = None  # optional YAML file extending the category table


def find_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "prod",
    env_var: str | None = None,
) -> Path:
    """Resolve `<config_dir>/<name>.yaml`, taking the name from env_var when not given."""
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    config_path = config_dir / f"{config_name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config(config_name: str | None = None, config_dir: Path = CONFIG_DIR) -> Config:
    """Load configuration from YAML, then apply environment overrides.

    Relative file paths inside the config resolve against the parent of
    config_dir (the repository root for the bundled configs), not the cwd.
    """
    path = find_config_path(config_name, config_dir, env_var="CONFIG_ENV")
    config = _parse_config(load_yaml(path), config_dir.parent)
    return _apply_env_overrides(config)


def _parse_config(data: dict, base_dir: Path) -> Config:
    """Parse config dictionary into Config object."""
    remote_data = data.get("remote", {})
    remote = RemoteConfig(
        base_url=remote_data.get("base_url", DEFAULT_API_URL),
        token=remote_data.get("token", ""),
        connect_timeout=remote_data.get("connect_timeout", 5.0),
        read_timeout=remote_data.get("read_timeout", 20.0),
        limit=remote_data.get("limit", 100),
        deadline=remote_data.get("deadline", 60.0),
    )

    content = ContentConfig(
        content_dir=_resolve_path(data.get("content", {}).get("content_dir", "content"), base_dir),
    )

    site = SiteConfig(
        site_url=data.get("site", {}).get("site_url", DEFAULT_SITE_URL),
        affiliate_tag=data.get("site", {}).get("affiliate_tag"),
    )

    return Config(
        remote=remote,
        content=content,
        site=site,
        category_rules=_resolve_path(data.get("category_rules"), base_dir),
    )


def _resolve_path(value: str | None, base_dir: Path) -> str | None:
    if not value:
        return None
    path = Path(value)
    return str(path if path.is_absolute() else base_dir / path)


def _apply_env_overrides(config: Config) -> Config:
    """Environment variables take precedence over file values."""
    config.remote.base_url = os.environ.get("CONTENT_API_URL") or config.remote.base_url
    config.remote.token = os.environ.get("CONTENT_API_TOKEN") or config.remote.token
    config.site.site_url = os.environ.get("SITE_URL") or config.site.site_url
    config.site.affiliate_tag = os.environ.get("AFFILIATE_TAG") or config.site.affiliate_tag
    return config

