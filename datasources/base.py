"""
Base connector and shared utilities for external services

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from abc import ABC
from typing import Dict, Optional

from datasources.exceptions import MissingCredentials


class BaseConnector(ABC):
    service_name: str = ""
    credential_env: str = ""

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        api_key: str = "",
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_url = str(base_url).rstrip("/")
        self.timeout = timeout
        self.api_key = api_key
        self.headers = headers or {}

    def _headers(self) -> Dict[str, str]:
        """Basic header set applied to every outbound request."""
        return dict(self.headers)

    def _require_key(self) -> str:
        if not self.api_key:
            raise MissingCredentials(f"{self.service_name} API key not found (set {self.credential_env})")
        return self.api_key
