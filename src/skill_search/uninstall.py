"""Uninstall a skill from the canonical directory and every agent directory."""
import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from skill_search.paths import SkillPaths, agent_path_for
from skill_search.registry import InstalledSkill

logger = logging.getLogger(__name__)

CANONICAL = "canonical"


@dataclass(frozen=True)
class RemovalResult:
    """Outcome of removing one location."""
    location: str
    path: Path
    error: OSError | None = None
    already_absent: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe_error(self) -> str:
        if self.error is None:
            return ""
        if isinstance(self.error, PermissionError):
            return "permission denied"
        return self.error.strerror or str(self.error)


@dataclass(frozen=True)
class UninstallOutcome:
    """Per-location results of one uninstall, in the order attempted."""
    skill: InstalledSkill
    results: tuple[RemovalResult, ...]

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def failures(self) -> list[RemovalResult]:
        return [r for r in self.results if not r.ok]

    @property
    def removed(self) -> list[str]:
        """Locations actually deleted (not counting already-absent ones)."""
        return [r.location for r in self.results if r.ok and not r.already_absent]

    def summary(self) -> str:
        """One-line, human readable account of what happened."""
        if self.ok:
            return f'Uninstalled "{self.skill.name}"'
        failed = ", ".join(f"{r.location} ({r.describe_error()})" for r in self.failures)
        removed = _join_names(self.removed)
        if removed:
            return f'Removed "{self.skill.name}" from {removed} but failed for {failed}'
        return f'Failed to uninstall "{self.skill.name}": {failed}'


def _join_names(names: list[str]) -> str:
    if len(names) <= 1:
        return "".join(names)
    return ", ".join(names[:-1]) + " and " + names[-1]


def _remove(path: Path):
    if os.path.islink(path):
        os.unlink(path)
    else:
        shutil.rmtree(path)


def remove_path(location: str, path: Path) -> RemovalResult:
    """Remove a symlink or directory tree. A missing path is success.

    Symlinks (including dangling ones left behind once the canonical copy
    is gone) are unlinked, never followed. When rmtree trips over a nested
    entry that vanished mid-walk, the removal is retried once; the path only
    counts as removed once it is really gone.
    """
    if not os.path.lexists(path):
        return RemovalResult(location, path, already_absent=True)
    error: OSError | None = None
    for attempt in range(2):
        try:
            _remove(path)
        except FileNotFoundError as e:
            if not os.path.lexists(path):
                return RemovalResult(location, path, already_absent=attempt == 0)
            error = e
            continue
        except OSError as e:
            error = e
            break
        logger.info("Removed %s (%s)", path, location)
        return RemovalResult(location, path)
    logger.warning("Failed to remove %s (%s): %s", path, location, error)
    return RemovalResult(location, path, error=error)


def uninstall(skill: InstalledSkill, paths: SkillPaths) -> UninstallOutcome:
    """Remove the canonical copy, then every agent copy.

    Every location is attempted even when earlier ones fail. The caller is
    expected to have confirmed with the user and to rescan afterwards.
    """
    results = [remove_path(CANONICAL, skill.path)]
    for location in paths.agents:
        results.append(remove_path(location.name, agent_path_for(location, skill.directory_name)))
    outcome = UninstallOutcome(skill=skill, results=tuple(results))
    if outcome.ok:
        logger.info("Uninstalled %s", skill.directory_name)
    else:
        logger.error("Uninstall of %s incomplete: %s", skill.directory_name, outcome.summary())
    return outcome
