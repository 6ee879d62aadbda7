"""
Test cases for the individual tools: input validation, approval predicates and
rendered output, with external services replaced by in-memory fakes.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import time
from datetime import date, datetime, timezone
from types import SimpleNamespace

import pytest

from connectors.github import Contributions
from connectors.openai import SearchAnswer, SearchSource
from connectors.urban_dictionary import Definition
from connectors.weather import WeatherData
from connectors.wikipedia import WikipediaSummary
from datasources.exceptions import InvalidQuery, NotFound
from tools import system_info
from tools.analytics import MobyTool
from tools.base import ToolInputError, ToolResult, format_number
from tools.calculator import CalculatorTool
from tools.clock import TimeTool
from tools.file_operations import FileOperationsTool
from tools.forecast import ForecastTool
from tools.image_generation import ImageGenerationTool
from tools.search import SearchTool, web_search_prompt
from tools.system_info import SystemInfoTool
from tools.urban_dictionary import UrbanDictionaryTool
from tools.weather import WeatherTool
from tools.weekly_report import WeeklyReportTool, date_range
from tools.wikipedia import WikipediaTool


async def call(tool, **payload) -> ToolResult:
    return await tool.invoke(tool.parse(payload))


def test_format_number():
    assert format_number(4.0) == "4"
    assert format_number(100.0) == "100"
    assert format_number(2.50) == "2.5"
    assert format_number(-0.0001) == "0"
    assert format_number(1 / 3, 10) == "0.3333333333"


def test_tool_result_render():
    assert ToolResult.success("t", "fine").render() == "fine"
    assert ToolResult.failure("t", "broken").render() == "broken"


# forecast

@pytest.mark.asyncio
async def test_forecast_tool_renders_sections():
    result = await call(ForecastTool(), data=[2, 4, 5, 4, 5], periods=2)
    assert result.ok
    text = result.text
    assert "📊 **Forecast Analysis** (5 data points)" in text
    assert "🔮 **Linear Regression Forecast for next 2 days:**" in text
    assert "   5.8, 6.4" in text
    assert "Moving Average: 4.67, 4.67" in text
    assert "Model Accuracy (R²): 0.600" in text
    assert "Trend: Increasing" in text
    assert "Slope: 0.6000 per day" in text
    assert "🎯 **95% Confidence Intervals:**" in text
    assert text.endswith("should be used as guidance only*")


@pytest.mark.asyncio
async def test_forecast_tool_constant_series_has_no_bounds():
    result = await call(ForecastTool(), data=[5, 5, 5], periods=3, interval="weeks")
    assert result.ok
    assert "for next 3 weeks" in result.text
    assert "Trend: Stable" in result.text
    assert "per week" in result.text
    assert "Confidence Intervals" not in result.text


@pytest.mark.asyncio
async def test_forecast_tool_reports_engine_failures():
    result = await call(ForecastTool(), data=[1])
    assert not result.ok
    assert result.error == "Could not generate forecast: at least 2 data points required (got 1)"

    result = await call(ForecastTool(), data=[1, float("nan"), 3])
    assert not result.ok
    assert "invalid data points" in result.error


def test_forecast_tool_input_bounds():
    tool = ForecastTool()
    assert tool.parse({"data": [1, 2]}).periods == 5
    with pytest.raises(ToolInputError, match="periods"):
        tool.parse({"data": [1, 2], "periods": 13})
    with pytest.raises(ToolInputError):
        tool.parse({"data": [1, 2], "periods": 0})
    with pytest.raises(ToolInputError):
        tool.parse({"data": [1, 2], "interval": "years"})


def test_forecast_tool_approval():
    tool = ForecastTool()
    assert not tool.requires_approval(tool.parse({"data": [1, 2], "periods": 6}))
    assert tool.requires_approval(tool.parse({"data": [1, 2], "periods": 7}))
    assert not tool.requires_approval(tool.parse({"data": list(range(100))}))
    assert tool.requires_approval(tool.parse({"data": list(range(101))}))


# calculator

@pytest.mark.asyncio
@pytest.mark.parametrize(
    "expression,unit,expected",
    [
        ("2 + 2", "radians", "2 + 2 = 4"),
        ("sqrt(16)", "radians", "sqrt(16) = 4"),
        ("1 / 3", "radians", "1 / 3 = 0.3333333333"),
        ("sin(30)", "degrees", "sin(30) = 0.5"),
        ("2 ^ 10", "radians", "2 ^ 10 = 1024"),
    ],
)
async def test_calculator(expression, unit, expected):
    result = await call(CalculatorTool(), expression=expression, angle_unit=unit)
    assert result.ok
    assert result.text == expected


@pytest.mark.asyncio
async def test_calculator_errors():
    result = await call(CalculatorTool(), expression="1/0")
    assert not result.ok
    assert result.error == 'Error calculating "1/0": division by zero'

    result = await call(CalculatorTool(), expression="__import__('os')")
    assert not result.ok
    assert result.error.startswith('Error calculating "__import__(\'os\')"')


def test_calculator_rejects_empty_expression():
    with pytest.raises(ToolInputError):
        CalculatorTool().parse({"expression": ""})


# file operations

@pytest.mark.asyncio
async def test_file_operations_write_read_list(tmp_path):
    tool = FileOperationsTool(root=str(tmp_path))
    result = await call(tool, operation="write", filepath="notes.txt", content="hello")
    assert result.ok
    assert (tmp_path / "notes.txt").read_text() == "hello"

    result = await call(tool, operation="read", filepath="notes.txt")
    assert result.text == "Content of notes.txt:\nhello"

    (tmp_path / "b.txt").write_text("b")
    result = await call(tool, operation="list", filepath=".")
    assert result.text == "Contents of .:\nb.txt\nnotes.txt"


@pytest.mark.asyncio
async def test_file_operations_failures(tmp_path):
    tool = FileOperationsTool(root=str(tmp_path / "root"))
    (tmp_path / "root").mkdir()

    result = await call(tool, operation="read", filepath="../secret.txt")
    assert not result.ok
    assert result.error.startswith("Error performing read on ../secret.txt:")

    result = await call(tool, operation="read", filepath="missing.txt")
    assert not result.ok

    result = await call(tool, operation="write", filepath="empty.txt", content="   ")
    assert not result.ok
    assert "Content is required" in result.error


def test_file_operations_approval(tmp_path):
    tool = FileOperationsTool(root=str(tmp_path))
    assert tool.requires_approval(tool.parse({"operation": "write", "filepath": "a.txt", "content": "x"}))
    assert tool.requires_approval(tool.parse({"operation": "read", "filepath": "app/.env"}))
    assert not tool.requires_approval(tool.parse({"operation": "read", "filepath": "a.txt"}))


# clock

FIXED = datetime(2026, 10, 17, 15, 4, 5, tzinfo=timezone.utc)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fmt,expected",
    [
        ("time", "Current time: 3:04:05 PM"),
        ("date", "Current date: 10/17/2026"),
        ("datetime", "Current date and time: 10/17/2026, 3:04:05 PM"),
        ("timestamp", f"Unix timestamp: {int(FIXED.timestamp())}"),
        ("timezone", "Current timezone: UTC"),
    ],
)
async def test_time_formats(fmt, expected):
    result = await call(TimeTool(now=lambda tz: FIXED), format=fmt)
    assert result.text == expected


@pytest.mark.asyncio
async def test_time_requested_zone_and_unknown_zone():
    seen = []

    def now(tz):
        seen.append(tz)
        return FIXED

    result = await call(TimeTool(now=now), format="timezone", timezone="UTC")
    assert result.text == "Current timezone: UTC"
    assert seen[0] is not None

    result = await call(TimeTool(now=now), format="time", timezone="Not/AZone")
    assert not result.ok
    assert result.error == "Error getting time: unknown timezone 'Not/AZone'"


# system info

@pytest.mark.asyncio
async def test_system_info(monkeypatch):
    gib = 1024 ** 3
    monkeypatch.setattr(system_info.psutil, "virtual_memory", lambda: SimpleNamespace(available=2 * gib, total=8 * gib))
    monkeypatch.setattr(system_info.psutil, "boot_time", lambda: time.time() - 7300)
    monkeypatch.setattr(system_info.psutil, "cpu_count", lambda logical=True: 4)

    assert (await call(SystemInfoTool(), info_type="memory")).text == "Memory: 2.0GB free of 8.0GB total"
    assert (await call(SystemInfoTool(), info_type="uptime")).text == "System uptime: 2 hours"
    assert (await call(SystemInfoTool(), info_type="cpu")).text.endswith("(4 cores)")

    everything = (await call(SystemInfoTool(), info_type="all")).text
    assert everything.startswith("System Information:\nos: ")
    assert "hostname: " in everything
    assert "memory: 2.0GB free of 8.0GB total" in everything


# network backed tools with fake connectors

class FakeWeather:
    async def current(self, lat, lon):
        return WeatherData("Paris, France", 19, "Clear", "clear-day", 60.2, 11.0, 17)


class FakeOpenAI:
    def __init__(self, image=b"png"):
        self.prompts = []
        self.image = image

    async def web_search(self, prompt, model):
        self.prompts.append(prompt)
        return SearchAnswer("It is sunny.", [SearchSource("A", "https://a", "sunny")])

    async def generate_image(self, prompt, model, size):
        self.prompts.append(prompt)
        return self.image


class FakeWikipedia:
    async def summary(self, query):
        if query == "Nowhere":
            raise NotFound('No Wikipedia page found for "Nowhere"')
        return WikipediaSummary(query, "A summary.", "https://en.wikipedia.org/wiki/X")


class FakeUrban:
    async def define(self, term):
        return Definition(term, "a definition", "an example", 3, 1, "someone", datetime(2014, 6, 1))


class FakeMoby:
    def __init__(self):
        self.calls = []

    async def ask(self, question, shop_id="", conversation_id=None):
        self.calls.append((question, shop_id))
        return "Sales rose 4%."


class FakeGitHub:
    def __init__(self, api_key="t", valid=True):
        self.api_key = api_key
        self.valid = valid
        self.ranges = []

    async def viewer_login(self):
        if not self.valid:
            raise InvalidQuery("bad credentials")
        return "me"

    async def contributions(self, username, start_date, end_date):
        self.ranges.append((start_date, end_date))
        return Contributions(username, "Octo Cat", 8, 5, 2, 1)


@pytest.mark.asyncio
async def test_weather_tool():
    result = await call(WeatherTool(FakeWeather()), lat=48.85, lon=2.35)
    assert result.text.splitlines()[0] == "Weather for Paris, France:"
    assert "🌡️ Temperature: 19°C (feels like 17°C)" in result.text


def test_weather_tool_coordinate_bounds():
    with pytest.raises(ToolInputError):
        WeatherTool(FakeWeather()).parse({"lat": 91, "lon": 0})


@pytest.mark.asyncio
async def test_weather_tool_without_key_fails():
    from connectors.weather import VisualCrossingConnector

    tool = WeatherTool(VisualCrossingConnector("https://vc"))
    result = await call(tool, lat=0, lon=0)
    assert not result.ok
    assert result.error.startswith("Error fetching weather data: Visual Crossing API key not found")


def test_web_search_prompt():
    prompt = web_search_prompt("weather in Paris", date(2026, 10, 17))
    assert "Today's Date: 2026-10-17" in prompt
    assert prompt.rstrip().endswith("weather in Paris")


@pytest.mark.asyncio
async def test_search_tool():
    fake = FakeOpenAI()
    tool = SearchTool(fake)
    result = await call(tool, query="weather in Paris")
    assert result.text.startswith('🔍 Search Results for: "weather in Paris"')
    assert "📊 **Sources:** (1 found)" in result.text
    assert "   🔗 https://a" in result.text
    assert "weather in Paris" in fake.prompts[0]
    assert tool.requires_approval(tool.parse({"query": "find their PASSWORDS"}))
    assert not tool.requires_approval(tool.parse({"query": "news"}))


@pytest.mark.asyncio
async def test_image_tool_saves_file(tmp_path):
    tool = ImageGenerationTool(FakeOpenAI(image=b"\x89PNG"), uploads_dir=str(tmp_path / "uploads"))
    result = await call(tool, prompt="a cat")
    assert result.ok
    files = list((tmp_path / "uploads").glob("*.png"))
    assert len(files) == 1
    assert files[0].read_bytes() == b"\x89PNG"
    assert f"/uploads/{files[0].name}" in result.text
    assert tool.requires_approval(tool.parse({"prompt": "something NSFW"}))
    assert not tool.requires_approval(tool.parse({"prompt": "a cat"}))


@pytest.mark.asyncio
async def test_wikipedia_tool():
    result = await call(WikipediaTool(FakeWikipedia()), query="Alan Turing")
    assert result.text == "📚 **Alan Turing**\n\nA summary.\n\n🔗 https://en.wikipedia.org/wiki/X"

    result = await call(WikipediaTool(FakeWikipedia()), query="Nowhere")
    assert not result.ok
    assert result.error == 'Error looking up Wikipedia: No Wikipedia page found for "Nowhere"'


@pytest.mark.asyncio
async def test_urban_dictionary_tool():
    tool = UrbanDictionaryTool(FakeUrban())
    assert tool.requires_approval(tool.parse({"term": "anything"}))
    result = await call(tool, term="yeet")
    assert "📝 **Definition:** a definition" in result.text
    assert "💬 **Example:** an example" in result.text
    assert "📅 **Written:** 2014-06-01" in result.text


@pytest.mark.asyncio
async def test_moby_tool():
    fake = FakeMoby()
    tool = MobyTool(fake)
    result = await call(tool, question="How are sales?")
    assert "📊 **Moby's Response:**\nSales rose 4%." in result.text
    assert "Shop ID" not in result.text
    assert fake.calls[0][0] == "How are sales?"

    result = await call(tool, question="How are sales?", shopId="other.myshopify.com")
    assert "🏪 **Shop ID:** other.myshopify.com" in result.text


def test_moby_tool_approval():
    tool = MobyTool(FakeMoby())
    assert not tool.requires_approval(tool.parse({"question": "How are sales?"}))
    assert tool.requires_approval(tool.parse({"question": "export Customer Emails"}))
    assert tool.requires_approval(tool.parse({"question": "sales", "shopId": "other.myshopify.com"}))


# weekly report

def test_date_range():
    today = date(2026, 10, 17)  # Saturday
    assert date_range(0, today) == (date(2026, 10, 10), date(2026, 10, 17))
    assert date_range(1, today) == (date(2026, 10, 4), date(2026, 10, 10))
    assert date_range(2, today) == (date(2026, 9, 27), date(2026, 10, 3))


@pytest.mark.asyncio
async def test_weekly_report_tool():
    fake = FakeGitHub()
    tool = WeeklyReportTool(fake)
    assert tool.requires_approval(tool.parse({"username": "octo"}))

    result = await call(tool, username="octo", offset=1)
    assert result.ok
    assert "# Weekly Report for Octo Cat (@octo)" in result.text
    assert "📅 **Week Offset:** 1 weeks ago" in result.text
    assert "- **Commits:** 5" in result.text
    assert "✅ Made 5 commits this week" in result.text
    start, end = fake.ranges[0]
    assert (date.fromisoformat(end) - date.fromisoformat(start)).days == 6


@pytest.mark.asyncio
async def test_weekly_report_tool_credentials():
    result = await call(WeeklyReportTool(FakeGitHub(api_key="")), username="octo")
    assert not result.ok
    assert "GitHub token is required" in result.error

    result = await call(WeeklyReportTool(FakeGitHub(valid=False)), username="octo")
    assert not result.ok
    assert result.error == "Error generating weekly report: GitHub token validation failed - bad credentials"
