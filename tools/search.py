from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from config import SEARCH_SENSITIVE_TERMS, settings
from connectors.openai import OpenAIConnector
from tools.base import Tool, ToolResult, contains_any, tool_errors


class SearchInput(BaseModel):
    query: str = Field(min_length=1, description="The search query to execute")


def web_search_prompt(query: str, today: Optional[date] = None) -> str:
    today = today or date.today()
    return (
        "## Identity\n"
        "You are a helpful personal assistant that is tasked with answering questions.\n"
        "You have the ability to search the web for information.\n"
        "Use it always to find the most up to date information you need.\n"
        "\n"
        "## Context\n"
        f"Today's Date: {today.isoformat()}\n"
        "\n"
        "## Query\n"
        f"{query}\n"
    )


class SearchTool(Tool):
    name = "search"
    description = "Search the web or perform general search queries"
    input_model = SearchInput
    error_prefix = "Error performing search"

    def __init__(self, connector: Optional[OpenAIConnector] = None):
        self._connector = connector

    @property
    def connector(self) -> OpenAIConnector:
        return self._connector or OpenAIConnector(
            settings.openai_url, timeout=settings.http_timeout, api_key=settings.openai_api_key
        )

    def requires_approval(self, params: SearchInput) -> bool:
        return contains_any(params.query, SEARCH_SENSITIVE_TERMS)

    @tool_errors
    async def invoke(self, params: SearchInput) -> ToolResult:
        query = params.query.strip()
        if not query:
            raise ValueError("Search query cannot be empty")
        result = await self.connector.web_search(web_search_prompt(query), settings.openai_model)

        lines = [f'🔍 Search Results for: "{params.query}"', "", "📝 **Answer:**", result.answer]
        if result.sources:
            lines += ["", f"📊 **Sources:** ({len(result.sources)} found)"]
            for i, source in enumerate(result.sources, start=1):
                lines.append(f"{i}. **{source.title}**")
                lines.append(f"   🔗 {source.url}")
                if source.snippet:
                    lines.append(f"   📝 {source.snippet}")
        return ToolResult.success(self.name, "\n".join(lines))
