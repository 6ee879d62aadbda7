"""
Constants and configuration for Mega Tools.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List, Optional

from pydantic_settings import BaseSettings


# third-party credentials keep their conventional, unprefixed names
VISUAL_CROSSING_API_KEY: str = os.getenv("VISUAL_CROSSING_API_KEY", "")
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
GITHUB_TOKEN: str = os.getenv("GITHUB_TOKEN", "")

MEGATOOLS_HTTP_TIMEOUT = int(os.getenv("MEGATOOLS_HTTP_TIMEOUT", "30"))

VISUAL_CROSSING_URL = os.getenv(
    "MEGATOOLS_VISUAL_CROSSING_URL",
    "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline",
).rstrip("/")
OPENAI_URL = os.getenv("MEGATOOLS_OPENAI_URL", "https://api.openai.com/v1").rstrip("/")
WIKIPEDIA_URL = os.getenv("MEGATOOLS_WIKIPEDIA_URL", "https://en.wikipedia.org/api/rest_v1").rstrip("/")
URBAN_DICTIONARY_URL = os.getenv("MEGATOOLS_URBAN_DICTIONARY_URL", "https://api.urbandictionary.com/v0").rstrip("/")
MOBY_URL = os.getenv("MEGATOOLS_MOBY_URL", "http://willy.srv.whale3.io").rstrip("/")
GITHUB_GRAPHQL_URL = os.getenv("MEGATOOLS_GITHUB_GRAPHQL_URL", "https://api.github.com/graphql")

DEFAULT_MOBY_SHOP_ID = "madisonbraids.myshopify.com"
DEFAULT_GITHUB_ORGANIZATION = "Triple-Whale"

# approval keyword lists, matched case-insensitively as substrings
SEARCH_SENSITIVE_TERMS: List[str] = ["personal information", "private data", "passwords"]
IMAGE_INAPPROPRIATE_TERMS: List[str] = ["nude", "violence", "explicit", "nsfw"]
MOBY_SENSITIVE_TERMS: List[str] = ["financial data", "customer emails", "private information", "api keys"]
FILE_SENSITIVE_PATHS: List[str] = ["/etc", "/usr", "/system", "package.json", ".env"]

FORECAST_DISCLAIMER = "Forecasts are estimates based on historical data and should be used as guidance only"


class Settings(BaseSettings):
    http_timeout: int = MEGATOOLS_HTTP_TIMEOUT

    visual_crossing_url: str = VISUAL_CROSSING_URL
    visual_crossing_api_key: str = VISUAL_CROSSING_API_KEY

    openai_url: str = OPENAI_URL
    openai_api_key: str = OPENAI_API_KEY
    openai_model: str = os.getenv("MEGATOOLS_OPENAI_MODEL", "gpt-4.1-mini")
    openai_image_model: str = "dall-e-3"
    openai_image_size: str = "1024x1024"

    wikipedia_url: str = WIKIPEDIA_URL
    urban_dictionary_url: str = URBAN_DICTIONARY_URL

    moby_url: str = MOBY_URL
    moby_default_shop_id: str = DEFAULT_MOBY_SHOP_ID
    moby_user_id: str = "test-user"

    github_graphql_url: str = GITHUB_GRAPHQL_URL
    github_token: str = GITHUB_TOKEN
    github_default_organization: str = DEFAULT_GITHUB_ORGANIZATION
    github_max_retries: int = 3
    # upper bound on a single rate-limit wait, seconds
    github_rate_limit_wait_cap: float = 600.0

    uploads_dir: str = os.getenv("MEGATOOLS_UPLOADS_DIR", os.path.join(os.getcwd(), "uploads"))
    files_root: Optional[str] = os.getenv("MEGATOOLS_FILES_ROOT") or None

    # forecast engine
    forecast_min_points: int = 2
    forecast_ma_window: int = 3
    forecast_es_alpha: float = 0.3
    # two-sided 95% normal quantile
    forecast_z_value: float = 1.96
    forecast_trend_threshold: float = 0.1
    forecast_round_digits: int = 2

    # forecast tool bounds and approval policy
    forecast_default_periods: int = 5
    forecast_max_periods: int = 12
    forecast_approval_max_points: int = 100
    forecast_approval_max_periods: int = 6

    # calculator
    calculator_max_length: int = 512

    model_config = {
        "env_prefix": "MEGATOOLS_",
        "extra": "ignore",
    }


settings = Settings()
