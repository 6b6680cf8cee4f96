"""Canonical skills directory and the per-agent skill directory table."""
from dataclasses import dataclass
from pathlib import Path

HOME = Path.home()

SKILL_FILENAME = "SKILL.md"

DEFAULT_SKILLS_DIR = HOME / ".agents" / "skills"

# Agent display name -> global skills directory, in display order
DEFAULT_AGENT_DIRS: dict[str, Path] = {
    "Cursor": HOME / ".cursor" / "skills",
    "Claude Code": HOME / ".claude" / "skills",
    "Copilot": HOME / ".copilot" / "skills",
    "Windsurf": HOME / ".codeium" / "windsurf" / "skills",
    "Goose": HOME / ".config" / "goose" / "skills",
    "Gemini": HOME / ".gemini" / "skills",
    "Roo": HOME / ".roo" / "skills",
    "Cline": HOME / ".cline" / "skills",
}


@dataclass(frozen=True)
class AgentLocation:
    """An agent tool and the directory it loads skills from."""
    name: str
    root: Path


@dataclass(frozen=True)
class SkillPaths:
    """Where skills live: the canonical root plus every agent's directory."""
    skills_dir: Path
    agents: tuple[AgentLocation, ...]

    @classmethod
    def from_mapping(cls, skills_dir: Path, agent_dirs: dict[str, Path]) -> "SkillPaths":
        agents = tuple(AgentLocation(name, Path(root)) for name, root in agent_dirs.items())
        return cls(skills_dir=Path(skills_dir), agents=agents)


def agent_path_for(location: AgentLocation, directory_name: str) -> Path:
    return location.root / directory_name


def shorten_path(path: Path | str, home: Path = HOME) -> str:
    """Replace the home directory prefix with ~ for display."""
    text = str(path)
    home_text = str(home)
    if text == home_text:
        return "~"
    if text.startswith(home_text + "/"):
        return "~" + text[len(home_text):]
    return text
