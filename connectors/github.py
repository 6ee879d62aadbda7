import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from datasources.base import BaseConnector
from datasources.exceptions import InvalidQuery, RateLimited
from datasources.helpers import post_json
from datasources.retry import retry

log = logging.getLogger(__name__)

VIEWER_QUERY = "query { viewer { login } }"

CONTRIBUTIONS_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $username) {
    login
    name
    contributionsCollection(from: $from, to: $to) {
      totalCommitContributions
      totalPullRequestContributions
      totalRepositoryContributions
      contributionCalendar {
        totalContributions
      }
    }
  }
}
"""


@dataclass(frozen=True)
class Contributions:
    login: str
    name: Optional[str]
    total: int
    commits: int
    pull_requests: int
    repositories: int


class GitHubConnector(BaseConnector):
    service_name = "GitHub"
    credential_env = "GITHUB_TOKEN"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = 30,
        max_retries: int = 3,
        wait_cap: float = 600.0,
    ):
        super().__init__(base_url, timeout=timeout, api_key=api_key)
        # wrap per instance so retry limits follow configuration
        self.graphql = retry(
            attempts=max_retries + 1,
            delay=1.0,
            backoff=2.0,
            jitter=1.0,
            max_delay=wait_cap,
            exceptions=(RateLimited,),
        )(self._graphql)

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/vnd.github.v4+json",
            "Authorization": f"Bearer {self._require_key()}",
            "Content-Type": "application/json",
        }

    async def _graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        log.debug("GitHub GraphQL request: %s", json.dumps(variables or {}))
        data = await post_json(
            self.base_url,
            {"query": query, "variables": variables or {}},
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="GitHub GraphQL API error",
            timeout_msg="GitHub GraphQL API timed out",
            unavailable_msg="Cannot reach GitHub at",
        )
        if data.get("errors"):
            raise InvalidQuery(f"GitHub GraphQL response errors: {json.dumps(data['errors'])}")
        return data.get("data") or {}

    async def viewer_login(self) -> str:
        data = await self.graphql(VIEWER_QUERY)
        return (data.get("viewer") or {}).get("login", "")

    async def contributions(self, username: str, start_date: str, end_date: str) -> Contributions:
        data = await self.graphql(
            CONTRIBUTIONS_QUERY,
            {"username": username, "from": f"{start_date}T00:00:00Z", "to": f"{end_date}T23:59:59Z"},
        )
        user = data.get("user")
        if not user:
            raise InvalidQuery(f"GitHub user {username!r} not found")
        collection = user.get("contributionsCollection") or {}
        return Contributions(
            login=user.get("login", username),
            name=user.get("name"),
            total=int((collection.get("contributionCalendar") or {}).get("totalContributions", 0)),
            commits=int(collection.get("totalCommitContributions", 0)),
            pull_requests=int(collection.get("totalPullRequestContributions", 0)),
            repositories=int(collection.get("totalRepositoryContributions", 0)),
        )
