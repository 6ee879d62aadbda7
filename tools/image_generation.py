import logging
import uuid
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from config import IMAGE_INAPPROPRIATE_TERMS, settings
from connectors.openai import OpenAIConnector
from tools.base import Tool, ToolResult, contains_any, tool_errors

log = logging.getLogger(__name__)


class ImageInput(BaseModel):
    prompt: str = Field(min_length=1, description="Prompt for the image generation")


class ImageGenerationTool(Tool):
    name = "generate_image"
    description = "Generate images based on text prompts using AI"
    input_model = ImageInput
    error_prefix = "Error generating image"

    def __init__(self, connector: Optional[OpenAIConnector] = None, uploads_dir: Optional[str] = None):
        self._connector = connector
        self._uploads_dir = uploads_dir

    @property
    def connector(self) -> OpenAIConnector:
        return self._connector or OpenAIConnector(
            settings.openai_url, timeout=settings.http_timeout, api_key=settings.openai_api_key
        )

    @property
    def uploads_dir(self) -> Path:
        return Path(self._uploads_dir or settings.uploads_dir)

    def requires_approval(self, params: ImageInput) -> bool:
        return contains_any(params.prompt, IMAGE_INAPPROPRIATE_TERMS)

    @tool_errors
    async def invoke(self, params: ImageInput) -> ToolResult:
        prompt = params.prompt.strip()
        if not prompt:
            raise ValueError("Image generation prompt cannot be empty")
        image = await self.connector.generate_image(prompt, settings.openai_image_model, settings.openai_image_size)

        self.uploads_dir.mkdir(parents=True, exist_ok=True)
        filename = f"{uuid.uuid4()}.png"
        path = self.uploads_dir / filename
        path.write_bytes(image)
        log.info("Saved generated image to %s (%d bytes)", path, len(image))

        lines = [
            "🎨 **Image Generated Successfully!**",
            "",
            f'📝 **Prompt:** "{params.prompt}"',
            f"🖼️ **Image saved to:** /uploads/{filename}",
            f"📁 **Full path:** {path.resolve()}",
            "",
            "Your image has been generated and saved locally. You can find it in the uploads directory.",
        ]
        return ToolResult.success(self.name, "\n".join(lines))
