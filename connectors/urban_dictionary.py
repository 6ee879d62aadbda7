import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from datasources.base import BaseConnector
from datasources.exceptions import NotFound
from datasources.helpers import fetch_json

_LINK_RE = re.compile(r"\[([^\]]+)\]")


@dataclass(frozen=True)
class Definition:
    word: str
    definition: str
    example: str
    thumbs_up: int
    thumbs_down: int
    author: str
    written_on: Optional[datetime]


def clean_markup(text: Optional[str]) -> str:
    """Drop the [square bracket] link markup and normalise line breaks."""
    if not text:
        return ""
    return _LINK_RE.sub(r"\1", text).replace("\r\n", "\n").strip()


def _parse_date(value: Any) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


class UrbanDictionaryConnector(BaseConnector):
    service_name = "Urban Dictionary"

    async def define(self, term: str) -> Definition:
        data = await fetch_json(
            f"{self.base_url}/define",
            params={"term": term},
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="Urban Dictionary API error",
            timeout_msg="Urban Dictionary API timed out",
            unavailable_msg="Cannot reach Urban Dictionary at",
        )
        entries = data.get("list") or []
        if not entries:
            raise NotFound(f'No definitions found for "{term}"')

        # the API returns entries ordered by votes, the first is the top definition
        top: Dict[str, Any] = entries[0]
        return Definition(
            word=top.get("word") or term,
            definition=clean_markup(top.get("definition")),
            example=clean_markup(top.get("example")),
            thumbs_up=int(top.get("thumbs_up") or 0),
            thumbs_down=int(top.get("thumbs_down") or 0),
            author=top.get("author") or "unknown",
            written_on=_parse_date(top.get("written_on")),
        )
