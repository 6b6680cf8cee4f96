"""SKILL.md frontmatter parsing — name/description lines plus the markdown body."""
import re
from dataclasses import dataclass

MARKER = "---"

_NAME_RE = re.compile(r"^name:[ \t]*(.*)$", re.MULTILINE)
_DESCRIPTION_RE = re.compile(r"^description:[ \t]*(.*)$", re.MULTILINE)

# Block scalar headers (|, >-, |2+ ...) whose value continues on the next lines
_BLOCK_SCALAR_RE = re.compile(r"^[|>][+-]?\d*[+-]?(\s+#.*)?$")


@dataclass(frozen=True)
class Frontmatter:
    """Fields declared in a leading --- block. Either may be missing."""
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class SkillDescriptor:
    """A parsed SKILL.md: optional frontmatter and the remaining body."""
    frontmatter: Frontmatter | None
    body: str

    @property
    def declared_name(self) -> str | None:
        return self.frontmatter.name if self.frontmatter else None

    @property
    def declared_description(self) -> str | None:
        return self.frontmatter.description if self.frontmatter else None


def _split(text: str) -> tuple[str, str] | None:
    """Return (metadata section, body) or None when there is no closed block."""
    lines = text.splitlines()
    if not lines or lines[0].rstrip() != MARKER:
        return None
    for i in range(1, len(lines)):
        if lines[i].rstrip() == MARKER:
            return "\n".join(lines[1:i]), "\n".join(lines[i + 1:]).strip()
    return None


def _field(pattern: re.Pattern, section: str) -> str | None:
    m = pattern.search(section)
    if not m:
        return None
    value = m.group(1).strip()
    if _BLOCK_SCALAR_RE.match(value):
        return None
    if value[:1] + value[-1:] in ("[]", "{}"):
        # Flow list or mapping, not a plain string
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        value = value[1:-1].strip()
    return value or None


def parse(text: str) -> SkillDescriptor:
    """Parse a SKILL.md document. Never raises.

    Documents without a leading ``---`` line, or whose block is never closed,
    come back with no frontmatter and the full text as body.
    """
    split = _split(text)
    if split is None:
        return SkillDescriptor(frontmatter=None, body=text)
    section, body = split
    frontmatter = Frontmatter(
        name=_field(_NAME_RE, section),
        description=_field(_DESCRIPTION_RE, section),
    )
    return SkillDescriptor(frontmatter=frontmatter, body=body)


def strip_frontmatter(text: str) -> str:
    return parse(text).body
