"""Entry point for skill-search."""
import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from skill_search.app import SkillSearchApp
from skill_search.catalog import CatalogClient
from skill_search.config import DEFAULT_CONFIG_PATH, ConfigError, build_paths, load_config
from skill_search.logging_config import setup_logging
from skill_search.paths import SkillPaths, shorten_path
from skill_search.registry import SkillRegistry
from skill_search.widgets.skill_list import format_first_seen


def print_installed(paths: SkillPaths, console: Console | None = None):
    """Print the installed skill registry as a table."""
    console = console or Console()
    skills = SkillRegistry(paths).assemble()
    if not skills:
        console.print(f"No skills installed in {shorten_path(paths.skills_dir)}")
        return
    table = Table(title=f"Installed Skills ({len(skills)})")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Agents", style="blue")
    table.add_column("First Seen", style="dim")
    for skill in skills:
        table.add_row(
            skill.name,
            skill.description,
            ", ".join(skill.agents) or "-",
            format_first_seen(skill.first_seen),
        )
    console.print(table)


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Search and manage agent skills")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Config file (TOML)")
    parser.add_argument("--skills-dir", type=Path, default=None, help="Canonical skills directory (defaults to ~/.agents/skills)")
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--list", action="store_true", help="Print installed skills and exit")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.skills_dir is not None:
            config["paths"]["skills_dir"] = str(args.skills_dir)
        paths = build_paths(config)
        catalog = CatalogClient.from_config(config)
    except ConfigError as e:
        print(f"skill-search: {e}", file=sys.stderr)
        sys.exit(2)

    setup_logging(args.log_level, args.log_file)

    if args.list:
        print_installed(paths)
        return

    app = SkillSearchApp(paths, catalog)
    app.run()


if __name__ == "__main__":
    main()
