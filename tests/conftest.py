import pytest
from pathlib import Path

from skill_search.paths import SkillPaths

PDF_FORMS_SKILL = "---\nname: PDF Forms\ndescription: Fill PDF forms\n---\nUsage..."


def make_skill(root: Path, dir_name: str, text: str | None = PDF_FORMS_SKILL) -> Path:
    """Create a skill directory; text=None leaves out SKILL.md."""
    skill_dir = root / dir_name
    skill_dir.mkdir(parents=True)
    if text is not None:
        (skill_dir / "SKILL.md").write_text(text)
    return skill_dir


@pytest.fixture
def skill_paths(tmp_path):
    return SkillPaths.from_mapping(
        tmp_path / "agents-home" / "skills",
        {
            "Cursor": tmp_path / "cursor" / "skills",
            "Claude Code": tmp_path / "claude" / "skills",
            "Copilot": tmp_path / "copilot" / "skills",
        },
    )


@pytest.fixture(name="make_skill")
def make_skill_fixture():
    return make_skill
