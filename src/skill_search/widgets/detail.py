"""Detail pane: markdown for an installed skill or a catalog entry."""
import logging

from textual.widgets import Markdown

from skill_search.catalog import CatalogSkill, format_installs
from skill_search.frontmatter import strip_frontmatter
from skill_search.paths import shorten_path
from skill_search.registry import InstalledSkill
from skill_search.widgets.skill_list import format_first_seen

logger = logging.getLogger(__name__)


def read_skill_body(skill: InstalledSkill) -> str:
    """SKILL.md without its frontmatter, or a placeholder if it can't be read."""
    try:
        return strip_frontmatter(skill.skill_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", skill.skill_file, e)
        return f"*Could not read {shorten_path(skill.skill_file)}*"


def installed_markdown(skill: InstalledSkill, body: str) -> str:
    agents = ", ".join(skill.agents) if skill.agents else "No agents detected"
    lines = [f"# {skill.name}"]
    if skill.description:
        lines += ["", f"*{skill.description}*"]
    lines += [
        "",
        f"- **Installed On:** {agents}",
        f"- **Path:** `{shorten_path(skill.path)}`",
        f"- **First Seen:** {format_first_seen(skill.first_seen)}",
        "",
        "---",
        "",
        body,
    ]
    return "\n".join(lines)


def catalog_markdown(result: CatalogSkill) -> str:
    return "\n".join([
        f"# {result.name}",
        "",
        "```bash",
        result.install_command,
        "```",
        "",
        f"- **Installs:** {format_installs(result.installs)}",
        f"- **Repository:** [{result.source}]({result.repository_url})",
        f"- **View on skills.sh:** [{result.name}]({result.url})",
    ])


class SkillDetailWidget(Markdown):
    """Shows details for whatever is highlighted in the skill list."""

    def show_installed(self, skill: InstalledSkill):
        self.update(installed_markdown(skill, read_skill_body(skill)))

    def show_catalog(self, result: CatalogSkill):
        self.update(catalog_markdown(result))

    def clear_detail(self):
        self.update("")
