"""
GitHub weekly activity report tool.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional, Tuple

from pydantic import BaseModel, Field

from config import settings
from connectors.github import Contributions, GitHubConnector
from datasources.exceptions import MissingCredentials
from tools.base import Tool, ToolResult, tool_errors


class WeeklyReportInput(BaseModel):
    username: str = Field(min_length=1, description="GitHub username to generate report for")
    offset: int = Field(
        default=0,
        ge=0,
        description="Offset the week range by this many weeks (default: 0 for last 7 days)",
    )
    generateSummary: bool = Field(
        default=False,
        description="Whether to generate an AI summary (reserved, currently ignored)",
    )
    organization: str = Field(
        default=settings.github_default_organization,
        description="GitHub organization name",
    )


def date_range(offset_weeks: int = 0, today: Optional[date] = None) -> Tuple[date, date]:
    """Last seven days for offset 0, otherwise the Sunday..Saturday week *offset_weeks* back."""
    today = today or date.today()
    if offset_weeks == 0:
        return today - timedelta(days=7), today
    # Python weekday(): Monday=0 .. Sunday=6; days since the most recent Sunday, a Sunday counts as 7
    since_sunday = (today.weekday() + 1) % 7 or 7
    start = today - timedelta(days=since_sunday + 7 * offset_weeks)
    return start, start + timedelta(days=6)


def render_report(c: Contributions, start: date, end: date, organization: str) -> str:
    lines = [
        f"# Weekly Report for {c.name or c.login} (@{c.login})",
        f"**Period:** {start.isoformat()} to {end.isoformat()}",
        f"**Organization:** {organization}",
        "",
        "## 📊 **Summary Statistics**",
        "",
        f"- **Total Contributions:** {c.total}",
        f"- **Commits:** {c.commits}",
        f"- **Pull Requests:** {c.pull_requests}",
        f"- **Repositories Contributed To:** {c.repositories}",
        "",
        "## 🎯 **Activity Overview**",
        "",
    ]
    if c.commits > 0:
        lines.append(f"✅ Made {c.commits} commits this week")
    if c.pull_requests > 0:
        lines.append(f"🔄 Created {c.pull_requests} pull requests")
    if c.repositories > 0:
        lines.append(f"📂 Contributed to {c.repositories} repositories")
    if c.total == 0:
        lines.append("ℹ️ No public contributions found for this period")
    lines += [
        "",
        "---",
        "",
        "*Report generated using GitHub's contributions API*",
        "*Note: This includes public contributions only*",
    ]
    return "\n".join(lines)


class WeeklyReportTool(Tool):
    name = "weekly_report"
    description = (
        "Generate comprehensive GitHub activity reports including contribution statistics for a specific "
        "user over a weekly period. Useful for team reports, performance reviews, and activity tracking."
    )
    input_model = WeeklyReportInput
    error_prefix = "Error generating weekly report"

    def __init__(self, connector: Optional[GitHubConnector] = None):
        self._connector = connector

    @property
    def connector(self) -> GitHubConnector:
        return self._connector or GitHubConnector(
            settings.github_graphql_url,
            api_key=settings.github_token,
            timeout=settings.http_timeout,
            max_retries=settings.github_max_retries,
            wait_cap=settings.github_rate_limit_wait_cap,
        )

    def requires_approval(self, params: WeeklyReportInput) -> bool:
        # reads activity data with the operator's token
        return True

    @tool_errors
    async def invoke(self, params: WeeklyReportInput) -> ToolResult:
        username = params.username.strip()
        if not username:
            raise ValueError("Username cannot be empty")

        connector = self.connector
        if not connector.api_key:
            raise MissingCredentials("GitHub token is required. Please set GITHUB_TOKEN in your environment variables.")
        try:
            await connector.viewer_login()
        except Exception as exc:
            raise RuntimeError(f"GitHub token validation failed - {exc}") from exc

        start, end = date_range(params.offset)
        contributions = await connector.contributions(username, start.isoformat(), end.isoformat())

        lines = [
            "📊 **GitHub Weekly Report Generated**",
            "",
            f"👤 **User:** {username}",
            f"🏢 **Organization:** {params.organization}",
        ]
        if params.offset != 0:
            lines.append(f"📅 **Week Offset:** {params.offset} weeks ago")
        lines += ["", "---", "", render_report(contributions, start, end, params.organization)]
        return ToolResult.success(self.name, "\n".join(lines))
