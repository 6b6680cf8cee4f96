"""Skill list widget: installed skills, or catalog search results."""
from datetime import datetime

from rich.text import Text
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from skill_search.catalog import CatalogSkill, format_installs
from skill_search.paths import shorten_path
from skill_search.registry import InstalledSkill

EMPTY_INSTALLED = "Search for Agent Skills. Type a query to search skills.sh"
EMPTY_RESULTS = "No Results. Try a different search query"


def format_first_seen(dt: datetime) -> str:
    return f"{dt:%B} {dt.day}, {dt.year}"


def install_style(installs: int) -> str:
    if installs >= 10_000:
        return "green"
    if installs >= 1_000:
        return "blue"
    return "dim"


def format_installed(skill: InstalledSkill) -> str:
    """Format an installed skill line as plain text (for testing)."""
    tags = " ".join(f"[{a}]" for a in skill.agents)
    line = f"  {skill.name}  {shorten_path(skill.path)}"
    if tags:
        line += f"  {tags}"
    return f"{line}  {format_first_seen(skill.first_seen)}"


def format_result(result: CatalogSkill, show_source: bool = True) -> str:
    """Format a search result line as plain text (for testing)."""
    line = f"  {result.name}  {format_installs(result.installs)}"
    if show_source:
        line += f"  {result.source}"
    return line


class SkillListWidget(OptionList):
    """Selectable list of installed skills or catalog results."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.items: list[InstalledSkill | CatalogSkill] = []
        self.show_source = True

    def show_installed(self, skills: tuple[InstalledSkill, ...]):
        self.clear_options()
        self.items = list(skills)
        if not skills:
            self.add_option(Option(Text(EMPTY_INSTALLED, style="dim"), disabled=True))
            return
        for skill in skills:
            text = Text()
            text.append(f"  {skill.name}", style="bold")
            text.append(f"  {shorten_path(skill.path)}", style="dim")
            for agent in skill.agents:
                text.append("  ")
                text.append(f" {agent} ", style="reverse blue")
            text.append(f"  {format_first_seen(skill.first_seen)}", style="dim")
            self.add_option(Option(text, id=skill.directory_name))
        self.highlighted = 0

    def show_results(self, results: list[CatalogSkill]):
        self.clear_options()
        self.items = list(results)
        if not results:
            self.add_option(Option(Text(EMPTY_RESULTS, style="dim"), disabled=True))
            return
        for result in results:
            text = Text()
            text.append(f"  {result.name}", style="bold")
            text.append(f"  {format_installs(result.installs)}", style=install_style(result.installs))
            if self.show_source:
                text.append(f"  {result.source}", style="dim")
            self.add_option(Option(text, id=result.id))
        self.highlighted = 0

    @property
    def current(self) -> InstalledSkill | CatalogSkill | None:
        """The item under the cursor, if any."""
        index = self.highlighted
        if index is None or not 0 <= index < len(self.items):
            return None
        return self.items[index]
