import base64
import binascii
from dataclasses import dataclass, field
from typing import Any, Dict, List

from datasources.base import BaseConnector
from datasources.exceptions import EmptyResponse, InvalidQuery
from datasources.helpers import post_json


@dataclass(frozen=True)
class SearchSource:
    title: str
    url: str
    snippet: str = ""


@dataclass(frozen=True)
class SearchAnswer:
    answer: str
    sources: List[SearchSource] = field(default_factory=list)


def _output_text(data: Dict[str, Any]) -> tuple[str, List[SearchSource]]:
    if data.get("output_text"):
        return data["output_text"], []

    parts: List[str] = []
    sources: List[SearchSource] = []
    seen: set[str] = set()
    for item in data.get("output") or []:
        if item.get("type") != "message":
            continue
        for content in item.get("content") or []:
            if content.get("type") != "output_text":
                continue
            text = content.get("text") or ""
            parts.append(text)
            for note in content.get("annotations") or []:
                url = note.get("url")
                if note.get("type") != "url_citation" or not url or url in seen:
                    continue
                seen.add(url)
                start, end = note.get("start_index"), note.get("end_index")
                snippet = text[start:end] if isinstance(start, int) and isinstance(end, int) else ""
                sources.append(SearchSource(title=note.get("title") or url, url=url, snippet=snippet))
    return "".join(parts), sources


class OpenAIConnector(BaseConnector):
    service_name = "OpenAI"
    credential_env = "OPENAI_API_KEY"

    def _headers(self) -> Dict[str, str]:
        return {
            **self.headers,
            "Authorization": f"Bearer {self._require_key()}",
            "Content-Type": "application/json",
        }

    async def web_search(self, prompt: str, model: str) -> SearchAnswer:
        payload = {
            "model": model,
            "tools": [{"type": "web_search_preview"}],
            "tool_choice": "required",
            "input": prompt,
        }
        data = await post_json(
            f"{self.base_url}/responses",
            payload,
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="OpenAI Responses API error",
            timeout_msg="OpenAI Responses API timed out",
            unavailable_msg="Cannot reach OpenAI at",
        )
        answer, sources = _output_text(data)
        return SearchAnswer(answer=answer or "No answer available", sources=sources)

    async def generate_image(self, prompt: str, model: str, size: str) -> bytes:
        payload = {
            "model": model,
            "prompt": prompt,
            "n": 1,
            "size": size,
            "response_format": "b64_json",
        }
        data = await post_json(
            f"{self.base_url}/images/generations",
            payload,
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="OpenAI Images API error",
            timeout_msg="OpenAI Images API timed out",
            unavailable_msg="Cannot reach OpenAI at",
        )
        images = data.get("data") or []
        encoded = (images[0] or {}).get("b64_json") if images else None
        if not encoded:
            raise EmptyResponse("No image data received from OpenAI")
        try:
            return base64.b64decode(encoded)
        except (binascii.Error, ValueError) as e:
            raise InvalidQuery("OpenAI returned malformed image data") from e
