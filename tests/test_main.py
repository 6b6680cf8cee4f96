import pytest
from rich.console import Console

from skill_search.__main__ import main, print_installed


def test_print_installed_lists_skills(skill_paths, make_skill):
    make_skill(skill_paths.skills_dir, "pdf-forms")
    (skill_paths.agents[0].root / "pdf-forms").mkdir(parents=True)
    console = Console(record=True, width=120)
    print_installed(skill_paths, console=console)
    out = console.export_text()
    assert "PDF Forms" in out
    assert "Fill PDF forms" in out
    assert "Cursor" in out


def test_print_installed_empty(skill_paths):
    console = Console(record=True, width=120)
    print_installed(skill_paths, console=console)
    assert "No skills installed" in console.export_text()


def test_main_list(tmp_path, make_skill, capsys):
    skills_dir = tmp_path / "skills"
    make_skill(skills_dir, "pdf-forms")
    main([
        "--config", str(tmp_path / "missing.toml"),
        "--skills-dir", str(skills_dir),
        "--log-file", str(tmp_path / "log" / "skill-search.log"),
        "--list",
    ])
    assert "PDF Forms" in capsys.readouterr().out


def test_main_bad_config_exits_2(tmp_path, capsys):
    config_file = tmp_path / "config.toml"
    config_file.write_text("[paths\n")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(config_file), "--list"])
    assert exc.value.code == 2
    assert "skill-search:" in capsys.readouterr().err


def test_main_wrong_value_type_exits_2(tmp_path, capsys):
    config_file = tmp_path / "config.toml"
    config_file.write_text("[search]\nlimit = \"x\"\n")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(config_file), "--list"])
    assert exc.value.code == 2
    assert "[search]" in capsys.readouterr().err
