"""Directory scanner — finds skills under the canonical root and their agent links."""
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable

from skill_search import frontmatter
from skill_search.frontmatter import SkillDescriptor
from skill_search.paths import SKILL_FILENAME, SkillPaths, agent_path_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScannedSkill:
    """One skill directory as found on disk, before ordering."""
    directory_name: str
    path: Path
    descriptor: SkillDescriptor
    first_seen: datetime
    linked_agents: tuple[str, ...]


def directory_created_at(path: Path) -> datetime:
    """Creation time of a directory.

    Uses the birth time where the platform reports one (macOS, BSD). Linux
    stat has none, and a directory's ctime moves whenever an entry inside it
    is added, removed or renamed, so the older of ctime and mtime is used
    there. Installers that keep archive mtimes then keep a stable order.
    """
    st = path.stat()
    created = getattr(st, "st_birthtime", None)
    if created is None:
        created = min(st.st_ctime, st.st_mtime)
    return datetime.fromtimestamp(created)


def linked_agents(paths: SkillPaths, directory_name: str) -> tuple[str, ...]:
    """Agents, in table order, whose skills directory has this skill right now."""
    return tuple(
        location.name
        for location in paths.agents
        if os.path.isdir(agent_path_for(location, directory_name))
    )


def _list_candidates(skills_dir: Path) -> list[Path]:
    try:
        with os.scandir(skills_dir) as it:
            entries = list(it)
    except (FileNotFoundError, NotADirectoryError):
        return []
    except OSError as e:
        logger.warning("Cannot list skills directory %s: %s", skills_dir, e)
        return []

    candidates = []
    for entry in entries:
        try:
            if entry.is_dir():
                candidates.append(Path(entry.path))
        except OSError:
            continue
    return candidates


def _scan_one(paths: SkillPaths, skill_dir: Path) -> ScannedSkill | None:
    skill_file = skill_dir / SKILL_FILENAME
    try:
        if not skill_file.is_file():
            return None
        text = skill_file.read_text(encoding="utf-8")
        first_seen = directory_created_at(skill_dir)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Skipping skill %s: %s", skill_dir.name, e)
        return None
    return ScannedSkill(
        directory_name=skill_dir.name,
        path=skill_dir,
        descriptor=frontmatter.parse(text),
        first_seen=first_seen,
        linked_agents=linked_agents(paths, skill_dir.name),
    )


def scan(paths: SkillPaths, is_cancelled: Callable[[], bool] | None = None) -> list[ScannedSkill]:
    """Scan the canonical skills directory.

    A missing directory means nothing is installed. Entries that fail to
    read are skipped. When ``is_cancelled`` returns True the remaining
    entries are left unprocessed.
    """
    results: list[ScannedSkill] = []
    for skill_dir in _list_candidates(paths.skills_dir):
        if is_cancelled is not None and is_cancelled():
            logger.debug("Scan of %s cancelled", paths.skills_dir)
            break
        scanned = _scan_one(paths, skill_dir)
        if scanned is not None:
            results.append(scanned)
    return results
