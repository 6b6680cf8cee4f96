"""Configuration loading for skill-search."""
import copy
import tomllib
from pathlib import Path

from skill_search.paths import DEFAULT_AGENT_DIRS, DEFAULT_SKILLS_DIR, SkillPaths

DEFAULT_CONFIG = {
    "paths": {
        "skills_dir": str(DEFAULT_SKILLS_DIR),
    },
    "agents": {name: str(path) for name, path in DEFAULT_AGENT_DIRS.items()},
    "search": {
        "api_url": "https://skills.sh/api/search",
        "limit": 25,
        "timeout": 10.0,
        "min_query_length": 2,
    },
}

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "skill-search" / "config.toml"


class ConfigError(Exception):
    """The config file exists but could not be read or parsed."""


def load_config(config_path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load config from TOML file, falling back to defaults.

    Sections are merged key by key, so a file only needs the values it
    changes. Agents named in the file replace the default directory for that
    agent or are appended after the defaults.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                user_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"{config_path}: {e}") from e
        for section in ("paths", "agents", "search"):
            values = user_config.get(section)
            if values is None:
                continue
            if not isinstance(values, dict):
                raise ConfigError(f"{config_path}: [{section}] must be a table")
            config[section].update(values)

    return config


def _directory(section: str, key: str, value) -> Path:
    if not isinstance(value, str):
        raise ConfigError(f"[{section}] {key} must be a path string, got {value!r}")
    return Path(value).expanduser()


def build_paths(config: dict) -> SkillPaths:
    """Resolve the configured directories into a SkillPaths value."""
    skills_dir = _directory("paths", "skills_dir", config["paths"]["skills_dir"])
    agent_dirs = {name: _directory("agents", name, path) for name, path in config["agents"].items()}
    return SkillPaths.from_mapping(skills_dir, agent_dirs)
