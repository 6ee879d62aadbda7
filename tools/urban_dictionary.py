from typing import Optional

from pydantic import BaseModel, Field

from config import settings
from connectors.urban_dictionary import UrbanDictionaryConnector
from tools.base import Tool, ToolResult, tool_errors


class UrbanDictionaryInput(BaseModel):
    term: str = Field(min_length=1, description="The term to look up in Urban Dictionary")


class UrbanDictionaryTool(Tool):
    name = "urban_dictionary"
    description = (
        "Look up slang definitions and internet culture terms from Urban Dictionary. Useful for "
        "understanding modern slang, internet terminology, and pop culture references."
    )
    input_model = UrbanDictionaryInput
    error_prefix = "Error looking up Urban Dictionary"

    def __init__(self, connector: Optional[UrbanDictionaryConnector] = None):
        self._connector = connector

    @property
    def connector(self) -> UrbanDictionaryConnector:
        return self._connector or UrbanDictionaryConnector(settings.urban_dictionary_url, timeout=settings.http_timeout)

    def requires_approval(self, params: UrbanDictionaryInput) -> bool:
        # entries are user written and frequently explicit
        return True

    @tool_errors
    async def invoke(self, params: UrbanDictionaryInput) -> ToolResult:
        term = params.term.strip()
        if not term:
            raise ValueError("Term cannot be empty")
        entry = await self.connector.define(term)

        lines = [
            "🗣️ **Urban Dictionary Lookup**",
            "",
            f'🔍 **Search Term:** "{params.term}"',
            "",
            f"**{entry.word}**",
            "",
            f"📝 **Definition:** {entry.definition}",
            "",
        ]
        if entry.example:
            lines += [f"💬 **Example:** {entry.example}", ""]
        lines += [
            f"👍 {entry.thumbs_up} 👎 {entry.thumbs_down}",
            f"👤 **By:** {entry.author}",
        ]
        if entry.written_on is not None:
            lines.append(f"📅 **Written:** {entry.written_on.date().isoformat()}")
        lines += ["", "⚠️ *Content from Urban Dictionary may contain explicit or offensive material*"]
        return ToolResult.success(self.name, "\n".join(lines))
