import uuid
from typing import Any, Dict, Optional

from datasources.base import BaseConnector
from datasources.exceptions import EmptyResponse
from datasources.helpers import post_json


class MobyConnector(BaseConnector):
    """Natural-language analytics questions against Triple Whale's Moby."""

    service_name = "Moby"

    def __init__(self, base_url: str, default_shop_id: str, user_id: str = "test-user", timeout: int = 30):
        super().__init__(base_url, timeout=timeout, headers={"content-type": "application/json"})
        self.default_shop_id = default_shop_id
        self.user_id = user_id

    async def ask(self, question: str, shop_id: str = "", conversation_id: Optional[str] = None) -> str:
        payload: Dict[str, Any] = {
            "stream": False,
            "shopId": shop_id or self.default_shop_id,
            "conversationId": conversation_id or str(uuid.uuid4()),
            "source": "chat",
            "dialect": "clickhouse",
            "userId": self.user_id,
            "additionalShopIds": [],
            "question": question,
            "query": question,
            "generateInsights": True,
            "isOutsideMainChat": True,
        }
        data = await post_json(
            f"{self.base_url}/answer-nlq-question",
            payload,
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="Moby API error",
            timeout_msg="Moby API timed out",
            unavailable_msg="Cannot reach Moby at",
        )
        messages = data.get("messages") or []
        text = (messages[-1] or {}).get("text") if messages else None
        if not text:
            raise EmptyResponse("No answer received from Moby")
        return text.strip()
