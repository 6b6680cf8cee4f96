from pathlib import Path

from skill_search.config import DEFAULT_CONFIG, build_paths
from skill_search.paths import (
    DEFAULT_AGENT_DIRS, AgentLocation, SkillPaths, agent_path_for, shorten_path,
)


def test_default_agent_table_order():
    assert list(DEFAULT_AGENT_DIRS) == [
        "Cursor", "Claude Code", "Copilot", "Windsurf", "Goose", "Gemini", "Roo", "Cline",
    ]


def test_default_config_paths():
    paths = build_paths(DEFAULT_CONFIG)
    assert paths.skills_dir == Path.home() / ".agents" / "skills"
    assert paths.agents[1] == AgentLocation("Claude Code", Path.home() / ".claude" / "skills")


def test_from_mapping_keeps_order_and_is_immutable():
    paths = SkillPaths.from_mapping(Path("/s"), {"B": Path("/b"), "A": Path("/a")})
    assert [a.name for a in paths.agents] == ["B", "A"]
    assert isinstance(paths.agents, tuple)


def test_agent_path_for_joins_directory_name():
    loc = AgentLocation("Cursor", Path("/home/u/.cursor/skills"))
    assert agent_path_for(loc, "pdf-forms") == Path("/home/u/.cursor/skills/pdf-forms")


def test_shorten_path():
    home = Path("/home/u")
    assert shorten_path(Path("/home/u/.agents/skills/x"), home=home) == "~/.agents/skills/x"
    assert shorten_path(Path("/home/u"), home=home) == "~"
    assert shorten_path(Path("/home/user2/x"), home=home) == "/home/user2/x"
    assert shorten_path(Path("/opt/skills"), home=home) == "/opt/skills"
