from datetime import datetime
from pathlib import Path

from skill_search.catalog import CatalogSkill
from skill_search.registry import InstalledSkill
from skill_search.widgets.skill_list import (
    format_first_seen, format_installed, format_result, install_style,
)


def _installed(agents=("Cursor", "Claude Code")) -> InstalledSkill:
    return InstalledSkill(
        name="PDF Forms",
        description="Fill PDF forms",
        directory_name="pdf-forms",
        path=Path.home() / ".agents" / "skills" / "pdf-forms",
        agents=agents,
        first_seen=datetime(2026, 2, 6, 22, 16),
    )


def test_format_first_seen():
    assert format_first_seen(datetime(2026, 2, 6)) == "February 6, 2026"


def test_format_installed_shows_agents_and_short_path():
    line = format_installed(_installed())
    assert "PDF Forms" in line
    assert "~/.agents/skills/pdf-forms" in line
    assert "[Cursor] [Claude Code]" in line
    assert "February 6, 2026" in line


def test_format_installed_without_agents():
    line = format_installed(_installed(agents=()))
    assert "[" not in line


def test_format_result():
    result = CatalogSkill(id="a/b/c", skill_id="c", name="c", installs=12_345, source="a/b")
    assert "12.3K" in format_result(result)
    assert "a/b" in format_result(result)
    assert "a/b" not in format_result(result, show_source=False)


def test_install_style():
    assert install_style(10_000) == "green"
    assert install_style(1_000) == "blue"
    assert install_style(999) == "dim"
