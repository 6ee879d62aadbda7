from typing import Optional

from pydantic import BaseModel, Field

from config import settings
from connectors.wikipedia import WikipediaConnector
from tools.base import Tool, ToolResult, tool_errors


class WikipediaInput(BaseModel):
    query: str = Field(min_length=1, description="Topic or page title to look up on Wikipedia")


class WikipediaTool(Tool):
    name = "wikipedia"
    description = "Look up a short encyclopedia summary of a topic from Wikipedia."
    input_model = WikipediaInput
    error_prefix = "Error looking up Wikipedia"

    def __init__(self, connector: Optional[WikipediaConnector] = None):
        self._connector = connector

    @property
    def connector(self) -> WikipediaConnector:
        return self._connector or WikipediaConnector(settings.wikipedia_url, timeout=settings.http_timeout)

    @tool_errors
    async def invoke(self, params: WikipediaInput) -> ToolResult:
        query = params.query.strip()
        if not query:
            raise ValueError("Query cannot be empty")
        page = await self.connector.summary(query)
        text = f"📚 **{page.title}**\n\n{page.summary}"
        if page.url:
            text += f"\n\n🔗 {page.url}"
        return ToolResult.success(self.name, text)
