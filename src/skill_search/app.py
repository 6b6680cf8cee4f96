"""Main Textual application: installed skills, catalog search, uninstall."""
import asyncio
import logging
import webbrowser

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.theme import Theme
from textual.widgets import Footer, Header, Input, OptionList, Static
from textual.worker import get_current_worker

from skill_search.catalog import CatalogClient, CatalogSkill
from skill_search.paths import SkillPaths, shorten_path
from skill_search.registry import InstalledSkill, SkillRegistry
from skill_search.screens.confirm import ConfirmUninstallModal
from skill_search.terminal import TerminalError, open_path, run_in_terminal
from skill_search.uninstall import UninstallOutcome, uninstall
from skill_search.widgets.detail import SkillDetailWidget
from skill_search.widgets.skill_list import SkillListWidget

logger = logging.getLogger(__name__)

# Wait for typing to pause before hitting the search API
SEARCH_DEBOUNCE = 0.3


TERMINAL_THEME = Theme(
    name="terminal",
    primary="#ffffff",
    secondary="#333333",
    accent="#ffffff",
    foreground="#ffffff",
    background="#000000",
    surface="#000000",
    panel="#000000",
    dark=True,
    variables={
        "border": "#333333",
        "border-blurred": "#333333",
        "scrollbar": "#333333",
        "scrollbar-background": "#000000",
    },
)

MAINFRAME_THEME = Theme(
    name="mainframe",
    primary="#33ff33",
    secondary="#000000",
    accent="#33ff33",
    foreground="#33ff33",
    background="#000000",
    surface="#000000",
    panel="#000000",
    dark=True,
    variables={
        "footer-foreground": "#1a7a1a",
        "footer-background": "#000000",
        "footer-key-foreground": "#33ff33",
        "footer-description-foreground": "#1a7a1a",
        "border": "#0a1f0a",
        "border-blurred": "#0a1f0a",
        "scrollbar": "#0a1f0a",
        "scrollbar-background": "#000000",
    },
)


class SkillSearchApp(App):
    """Browse installed agent skills and search skills.sh."""

    TITLE = "SKILL SEARCH"
    CSS = """
    Screen { background: #000000; }
    #search { border: tall $border; }
    #main-row { height: 1fr; }
    #list-panel { width: 1fr; border: tall $border; }
    #detail-panel { width: 1fr; border: tall $border; }
    #detail-panel.hidden { display: none; }
    .panel-title { text-style: bold; padding: 0 1; }
    SkillListWidget { border: none; height: 1fr; }
    Header { background: #000000; color: $foreground; }
    Footer { background: #000000; }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+k", "copy", "Copy", priority=True),
        Binding("ctrl+o", "open", "Open"),
        Binding("ctrl+r", "open_repository", "Repo"),
        Binding("ctrl+t", "send_to_terminal", "Terminal"),
        Binding("ctrl+d", "toggle_detail", "Detail", priority=True),
        Binding("ctrl+x", "uninstall", "Uninstall", priority=True),
        Binding("f5", "refresh", "Refresh"),
        Binding("f2", "toggle_theme", "Theme"),
    ]

    def __init__(self, paths: SkillPaths, catalog: CatalogClient):
        super().__init__()
        self.paths = paths
        self.registry = SkillRegistry(paths)
        self.catalog = catalog
        self.installed: tuple[InstalledSkill, ...] = ()
        self._query = ""
        self._current_theme = "terminal"

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Search agent skills…", id="search")
        with Horizontal(id="main-row"):
            with Vertical(id="list-panel"):
                yield Static("INSTALLED SKILLS", classes="panel-title", id="list-title")
                yield SkillListWidget(id="skill-list")
            with VerticalScroll(id="detail-panel"):
                yield SkillDetailWidget(id="detail")
        yield Footer()

    def on_mount(self):
        self.register_theme(TERMINAL_THEME)
        self.register_theme(MAINFRAME_THEME)
        self.theme = "terminal"
        self.sub_title = shorten_path(self.paths.skills_dir)
        self.refresh_installed()

    async def on_unmount(self):
        await self.catalog.close()

    # -- state -----------------------------------------------------------

    @property
    def searching(self) -> bool:
        return bool(self._query)

    def _current_item(self) -> InstalledSkill | CatalogSkill | None:
        return self.query_one("#skill-list", SkillListWidget).current

    def _show_installed(self):
        self.query_one("#list-title", Static).update(f"INSTALLED SKILLS  {len(self.installed)} skills")
        self.query_one("#skill-list", SkillListWidget).show_installed(self.installed)
        self._update_detail()

    def _show_results(self, results: list[CatalogSkill]):
        self.query_one("#list-title", Static).update(f"RESULTS  {len(results)} skills")
        skill_list = self.query_one("#skill-list", SkillListWidget)
        skill_list.show_source = self.query_one("#detail-panel").has_class("hidden")
        skill_list.show_results(results)
        self._update_detail()

    def _update_detail(self):
        detail = self.query_one("#detail", SkillDetailWidget)
        item = self._current_item()
        if isinstance(item, InstalledSkill):
            detail.show_installed(item)
        elif isinstance(item, CatalogSkill):
            detail.show_catalog(item)
        else:
            detail.clear_detail()

    # -- workers ---------------------------------------------------------

    @work(thread=True, exclusive=True, group="scan")
    def refresh_installed(self):
        """Rescan the skills directory. A newer scan supersedes this one."""
        worker = get_current_worker()
        snapshot = self.registry.assemble(is_cancelled=lambda: worker.is_cancelled)
        if worker.is_cancelled:
            return
        self.call_from_thread(self._apply_snapshot, snapshot)

    def _apply_snapshot(self, snapshot: tuple[InstalledSkill, ...]):
        self.installed = snapshot
        if not self.searching:
            self._show_installed()

    @work(exclusive=True, group="search")
    async def run_search(self, query: str):
        await asyncio.sleep(SEARCH_DEBOUNCE)
        results = await self.catalog.search(query)
        if query != self._query:
            return
        self._show_results(results)

    @work(thread=True, group="uninstall")
    def run_uninstall(self, skill: InstalledSkill):
        outcome = uninstall(skill, self.paths)
        self.call_from_thread(self._after_uninstall, outcome)

    def _after_uninstall(self, outcome: UninstallOutcome):
        if outcome.ok:
            self.notify(outcome.summary(), title="Uninstalled")
        else:
            self.notify(outcome.summary(), title="Failed to uninstall", severity="error", timeout=10)
        self.refresh_installed()

    # -- events ----------------------------------------------------------

    def on_input_changed(self, event: Input.Changed):
        self._query = event.value.strip()
        if not self._query:
            self.workers.cancel_group(self, "search")
            self._show_installed()
            return
        self.run_search(self._query)

    def on_input_submitted(self, event: Input.Submitted):
        self.query_one("#skill-list", SkillListWidget).focus()

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted):
        self._update_detail()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected):
        self.query_one("#detail-panel").remove_class("hidden")
        self._update_detail()
        self.query_one("#detail-panel").focus()

    # -- actions ---------------------------------------------------------

    def action_copy(self):
        item = self._current_item()
        if isinstance(item, CatalogSkill):
            self.copy_to_clipboard(item.install_command)
            self.notify(item.install_command, title="Copied install command")
        elif isinstance(item, InstalledSkill):
            self.copy_to_clipboard(str(item.path))
            self.notify(shorten_path(item.path), title="Copied path")

    def action_open(self):
        item = self._current_item()
        if isinstance(item, CatalogSkill):
            webbrowser.open(item.url)
        elif isinstance(item, InstalledSkill):
            self._open_path(str(item.skill_file))

    def action_open_repository(self):
        item = self._current_item()
        if isinstance(item, CatalogSkill):
            webbrowser.open(item.repository_url)
        elif isinstance(item, InstalledSkill):
            self._open_path(str(item.path))

    def _open_path(self, path: str):
        try:
            open_path(path)
        except TerminalError as e:
            logger.warning("%s", e)
            self.notify(str(e), severity="error")

    def action_send_to_terminal(self):
        item = self._current_item()
        if not isinstance(item, CatalogSkill):
            return
        try:
            run_in_terminal(item.install_command)
        except TerminalError as e:
            logger.warning("%s", e)
            self.notify(str(e), title="Send to terminal failed", severity="error")

    def action_toggle_detail(self):
        panel = self.query_one("#detail-panel")
        panel.toggle_class("hidden")
        if self.searching:
            skill_list = self.query_one("#skill-list", SkillListWidget)
            index = skill_list.highlighted
            skill_list.show_source = panel.has_class("hidden")
            skill_list.show_results([i for i in skill_list.items if isinstance(i, CatalogSkill)])
            if index is not None and index < len(skill_list.items):
                skill_list.highlighted = index

    def action_uninstall(self):
        item = self._current_item()
        if not isinstance(item, InstalledSkill):
            return

        def _confirmed(confirmed: bool | None):
            if confirmed:
                self.run_uninstall(item)

        self.push_screen(ConfirmUninstallModal(item, shorten_path(self.paths.skills_dir)), _confirmed)

    def action_refresh(self):
        self.refresh_installed()

    def action_toggle_theme(self):
        if self._current_theme == "terminal":
            self.theme = "mainframe"
            self._current_theme = "mainframe"
        else:
            self.theme = "terminal"
            self._current_theme = "terminal"
