"""Client for the skills.sh search API.

Search failures never reach the UI: they are logged and come back as an
empty result list, like a query with no matches.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from skill_search.config import ConfigError

logger = logging.getLogger(__name__)

SITE_URL = "https://skills.sh"
SEARCH_URL = f"{SITE_URL}/api/search"


@dataclass(frozen=True)
class CatalogSkill:
    """A skill listed in the remote catalog."""
    id: str
    skill_id: str
    name: str
    installs: int
    source: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CatalogSkill:
        try:
            installs = int(data.get("installs") or 0)
        except (TypeError, ValueError):
            installs = 0
        return cls(
            id=str(data["id"]),
            skill_id=str(data.get("skillId", "")),
            name=str(data.get("name", "")),
            installs=installs,
            source=str(data.get("source", "")),
        )

    @property
    def install_command(self) -> str:
        return f"npx skills add {self.source} --skill {self.name}"

    @property
    def url(self) -> str:
        return f"{SITE_URL}/{self.id}"

    @property
    def repository_url(self) -> str:
        return f"https://github.com/{self.source}"


def format_installs(n: int) -> str:
    """Compact install count: 999, 1.2K, 2.5M."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return str(n)


def parse_results(payload: Any) -> list[CatalogSkill]:
    """Turn a search response into unique skills, most installed first.

    The API can return the same id more than once; the first one wins.
    Malformed entries are dropped.
    """
    if not isinstance(payload, dict):
        return []
    seen: dict[str, CatalogSkill] = {}
    for item in payload.get("skills") or []:
        if not isinstance(item, dict) or "id" not in item:
            continue
        skill = CatalogSkill.from_dict(item)
        if skill.id not in seen:
            seen[skill.id] = skill
    return sorted(seen.values(), key=lambda s: -s.installs)


class CatalogClient:
    """Async search client for skills.sh.

    Parameters
    ----------
    api_url:
        Search endpoint.
    limit:
        Maximum number of results requested per query.
    timeout:
        HTTP request timeout in seconds.
    min_query_length:
        Trimmed queries shorter than this are not sent.
    transport:
        Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        api_url: str = SEARCH_URL,
        *,
        limit: int = 25,
        timeout: float = 10.0,
        min_query_length: int = 2,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_url = api_url
        self.limit = limit
        self.min_query_length = min_query_length
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(cls, config: dict) -> CatalogClient:
        search = config["search"]
        if not isinstance(search["api_url"], str):
            raise ConfigError(f"[search] api_url must be a string, got {search['api_url']!r}")
        try:
            return cls(
                search["api_url"],
                limit=int(search["limit"]),
                timeout=float(search["timeout"]),
                min_query_length=int(search["min_query_length"]),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"[search] {e}") from e

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def search(self, query: str) -> list[CatalogSkill]:
        query = query.strip()
        if len(query) < self.min_query_length:
            return []
        try:
            resp = await self._ensure_client().get(
                self.api_url, params={"q": query, "limit": self.limit}
            )
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Skill search for %r failed: %s", query, e)
            return []
        return parse_results(payload)
