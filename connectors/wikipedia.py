from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import quote

from datasources.base import BaseConnector
from datasources.exceptions import EmptyResponse, NotFound
from datasources.helpers import fetch_json

USER_AGENT = "megatools/0.1 (https://github.com/megatools)"


@dataclass(frozen=True)
class WikipediaSummary:
    title: str
    summary: str
    url: Optional[str]


class WikipediaConnector(BaseConnector):
    service_name = "Wikipedia"

    def _headers(self) -> Dict[str, str]:
        return {**self.headers, "User-Agent": USER_AGENT, "Accept": "application/json"}

    async def summary(self, query: str) -> WikipediaSummary:
        slug = quote(query.strip().replace(" ", "_"), safe="")
        url = f"{self.base_url}/page/summary/{slug}"
        try:
            data = await fetch_json(
                url,
                headers=self._headers(),
                timeout=self.timeout,
                invalid_msg="Wikipedia API error",
                timeout_msg="Wikipedia API timed out",
                unavailable_msg="Cannot reach Wikipedia at",
            )
        except NotFound as e:
            raise NotFound(f'No Wikipedia page found for "{query}"') from e

        extract = data.get("extract")
        if not extract:
            raise EmptyResponse("No summary found for this topic")
        page = ((data.get("content_urls") or {}).get("desktop") or {}).get("page")
        return WikipediaSummary(title=data.get("title") or query, summary=extract, url=page)
