# -*- coding: utf-8 -*-
"""
Тесты для scripts/weather/_processes/formatter.py
"""
from datetime import datetime, timedelta, timezone

from core.models.weather_response import WeatherReport
from scripts.weather._processes.formatter import format_weather_report, humanize_updated
from tests.fixtures.openweather import sample_payload

REPORT_TIME = datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_format_weather_report():
    report = WeatherReport.from_dict(sample_payload(
        main={"temp": 273.15, "temp_min": 263.15, "temp_max": 283.15, "humidity": 65},
        wind={"speed": 10.0, "deg": 90},
    ))
    text = format_weather_report(report, now=REPORT_TIME + timedelta(minutes=5))

    assert text == (
        "London || Updated: 5 minutes ago || "
        "Conditions: Drizzle (light intensity drizzle) || "
        "Temperature: 32.00°F (0.00°C) || "
        "High/Low: 50.00°F / 14.00°F (10.00°C / -10.00°C) || "
        "Humidity: 65% || "
        "E at 22.4 MPH (36.0 km/h)"
    )
    print("✅ test_format_weather_report passed")


def test_format_without_conditions():
    report = WeatherReport.from_dict(sample_payload(weather=[]))
    text = format_weather_report(report, now=REPORT_TIME)

    assert "Conditions:  () ||" in text
    assert text.startswith("London || Updated: ")


def test_humanize_updated():
    assert humanize_updated(REPORT_TIME, now=REPORT_TIME + timedelta(minutes=5)) == "5 minutes ago"
    assert humanize_updated(REPORT_TIME, now=REPORT_TIME + timedelta(days=2)) == "2 days ago"


if __name__ == "__main__":
    test_format_weather_report()
    test_format_without_conditions()
