from datetime import datetime

from skill_search.catalog import CatalogSkill
from skill_search.registry import InstalledSkill
from skill_search.screens.confirm import confirmation_message
from skill_search.widgets.detail import catalog_markdown, installed_markdown, read_skill_body


def _installed(path, agents=("Cursor",), description="Fill PDF forms") -> InstalledSkill:
    return InstalledSkill(
        name="PDF Forms",
        description=description,
        directory_name=path.name,
        path=path,
        agents=agents,
        first_seen=datetime(2026, 2, 6),
    )


def test_read_skill_body_strips_frontmatter(tmp_path, make_skill):
    skill_dir = make_skill(tmp_path, "pdf-forms")
    assert read_skill_body(_installed(skill_dir)) == "Usage..."


def test_read_skill_body_missing_file(tmp_path):
    body = read_skill_body(_installed(tmp_path / "gone"))
    assert "Could not read" in body


def test_installed_markdown(tmp_path):
    md = installed_markdown(_installed(tmp_path / "pdf-forms"), "Usage...")
    assert md.startswith("# PDF Forms")
    assert "*Fill PDF forms*" in md
    assert "**Installed On:** Cursor" in md
    assert "February 6, 2026" in md
    assert md.endswith("Usage...")


def test_installed_markdown_no_agents_no_description(tmp_path):
    md = installed_markdown(_installed(tmp_path / "x", agents=(), description=""), "")
    assert "No agents detected" in md
    assert "\n*" not in md.split("- **")[0]


def test_catalog_markdown():
    result = CatalogSkill(id="a/b/c", skill_id="c", name="c", installs=1500, source="a/b")
    md = catalog_markdown(result)
    assert "npx skills add a/b --skill c" in md
    assert "1.5K" in md
    assert "https://github.com/a/b" in md
    assert "https://skills.sh/a/b/c" in md


def test_confirmation_message(tmp_path):
    message = confirmation_message(_installed(tmp_path / "pdf-forms", agents=("Cursor", "Copilot")), "~/.agents/skills")
    assert "~/.agents/skills/" in message
    assert "Linked to: Cursor, Copilot" in message


def test_confirmation_message_unlinked(tmp_path):
    message = confirmation_message(_installed(tmp_path / "pdf-forms", agents=()), "~/.agents/skills")
    assert "Linked to" not in message
