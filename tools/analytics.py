import uuid
from typing import Optional

from pydantic import BaseModel, Field

from config import MOBY_SENSITIVE_TERMS, settings
from connectors.moby import MobyConnector
from tools.base import Tool, ToolResult, contains_any, tool_errors


class MobyInput(BaseModel):
    question: str = Field(
        default="What is triple whale?",
        description="Question to ask Triple Whale Moby about e-commerce analytics",
    )
    shopId: str = Field(default=settings.moby_default_shop_id, description="Shopify store URL")


class MobyTool(Tool):
    name = "moby"
    description = (
        "Get e-commerce analytics and insights from Triple Whale's AI, Moby. Useful for Shopify store "
        "analytics, sales data, customer insights, and business metrics."
    )
    input_model = MobyInput
    error_prefix = "Error querying Moby"

    def __init__(self, connector: Optional[MobyConnector] = None):
        self._connector = connector

    @property
    def connector(self) -> MobyConnector:
        return self._connector or MobyConnector(
            settings.moby_url,
            default_shop_id=settings.moby_default_shop_id,
            user_id=settings.moby_user_id,
            timeout=settings.http_timeout,
        )

    def requires_approval(self, params: MobyInput) -> bool:
        return contains_any(params.question, MOBY_SENSITIVE_TERMS) or params.shopId != settings.moby_default_shop_id

    @tool_errors
    async def invoke(self, params: MobyInput) -> ToolResult:
        question = params.question.strip()
        if not question:
            raise ValueError("Question cannot be empty")
        answer = await self.connector.ask(question, params.shopId, conversation_id=str(uuid.uuid4()))

        lines = ["🐋 **Triple Whale Moby Analytics**", "", f'❓ **Question:** "{params.question}"']
        if params.shopId != settings.moby_default_shop_id:
            lines.append(f"🏪 **Shop ID:** {params.shopId}")
        lines += ["", "📊 **Moby's Response:**", answer, "", "💡 *Powered by Triple Whale's AI Analytics*"]
        return ToolResult.success(self.name, "\n".join(lines))
