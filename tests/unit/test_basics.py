from __future__ import annotations

from report_engine import config
from report_engine.charts import PALETTE, chart_config, palette_for
from report_engine.domain.models import ChartKind, ChartSeries, Dataset
from report_engine.engine import available_kinds


def test_get_settings_defaults() -> None:
    settings = config.get_settings()
    assert settings.api_url == "http://localhost:8000"
    assert settings.api_token is None
    assert settings.report_output_path == "report.pdf"
    assert settings.report_title == "Smart Campus Report"
    assert settings.http_timeout_seconds > 0
    assert settings.default_lookback_days > 0


def test_get_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("API_URL", "https://campus.example/api")
    monkeypatch.setenv("API_TOKEN", "secret")
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.api_url == "https://campus.example/api"
    assert settings.api_token == "secret"


def test_available_kinds_contains_known_entries() -> None:
    assert available_kinds() == ["announcements", "users"]


def test_palette_is_stable_and_keyed_by_position() -> None:
    labels = [f"sender-{index}" for index in range(len(PALETTE) + 2)]

    first = palette_for(labels)
    second = palette_for(labels)

    assert first == second
    assert first[0] == first[len(PALETTE)]
    assert first[0] != first[1]


def test_line_chart_config_colors_each_dataset() -> None:
    series = ChartSeries(
        labels=["2024-1", "2024-2"],
        datasets=[Dataset(label="Students", values=[1, 1]), Dataset(label="Lecturers", values=[1, 0])],
    )

    payload = chart_config(series, ChartKind.LINE)

    assert payload["type"] == "line"
    assert payload["data"]["labels"] == ["2024-1", "2024-2"]
    students, lecturers = payload["data"]["datasets"]
    assert students["data"] == [1, 1]
    assert students["borderColor"] == "rgb(255, 99, 132)"
    assert lecturers["backgroundColor"] == "rgba(53, 162, 235, 0.5)"
    assert payload["options"]["plugins"]["legend"]["position"] == "top"


def test_bar_chart_config_colors_each_label() -> None:
    series = ChartSeries(labels=["Alice", "Bob"], datasets=[Dataset(label="Announcements", values=[2, 1])])

    payload = chart_config(series, "bar")

    (dataset,) = payload["data"]["datasets"]
    assert payload["type"] == "bar"
    assert dataset["backgroundColor"] == palette_for(["Alice", "Bob"])
