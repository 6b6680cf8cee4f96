"""Skill registry — installed skills from the canonical directory, newest first."""
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable

from skill_search.paths import SKILL_FILENAME, SkillPaths
from skill_search.scanner import ScannedSkill, scan


@dataclass(frozen=True)
class InstalledSkill:
    """A skill present in the canonical skills directory."""
    name: str
    description: str
    directory_name: str
    path: Path
    agents: tuple[str, ...]
    first_seen: datetime

    @property
    def skill_file(self) -> Path:
        return self.path / SKILL_FILENAME


def _to_installed(scanned: ScannedSkill) -> InstalledSkill:
    descriptor = scanned.descriptor
    return InstalledSkill(
        name=descriptor.declared_name or scanned.directory_name,
        description=descriptor.declared_description or "",
        directory_name=scanned.directory_name,
        path=scanned.path,
        agents=scanned.linked_agents,
        first_seen=scanned.first_seen,
    )


def _sort_key(skill: InstalledSkill):
    return (-skill.first_seen.timestamp(), skill.directory_name)


class SkillRegistry:
    """Builds snapshots of the installed skills.

    Every call to :meth:`assemble` rescans the filesystem and returns a new
    tuple; nothing is cached between calls.
    """

    def __init__(self, paths: SkillPaths):
        self.paths = paths

    def assemble(self, is_cancelled: Callable[[], bool] | None = None) -> tuple[InstalledSkill, ...]:
        skills = [_to_installed(s) for s in scan(self.paths, is_cancelled=is_cancelled)]
        skills.sort(key=_sort_key)
        return tuple(skills)
