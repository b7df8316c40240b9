"""Unit tests for the calendar header model."""

from datetime import datetime

import pytest

from models.header import Header, format_title


class TestFormatTitle:
    @pytest.mark.parametrize("view_mode", ["month", "week"])
    def test_month_and_year(self, view_mode):
        assert format_title(datetime(2024, 6, 15), view_mode) == "June 2024"

    def test_day_view_shows_full_date(self):
        assert format_title(datetime(2024, 6, 15), "day") == "Saturday, June 15, 2024"

    def test_day_of_month_is_not_zero_padded(self):
        assert format_title(datetime(2024, 6, 2), "day") == "Sunday, June 2, 2024"


class TestHeader:
    def test_computed_fields(self):
        header = Header(
            current_date=datetime(2024, 6, 15),
            view_mode="week",
            user_name="ada lovelace",
        )

        assert header.title == "June 2024"
        assert header.view_label == "Week"
        assert header.view_options == ["day", "week", "month"]
        assert header.user_initial == "A"

    def test_user_initial_fallback(self):
        header = Header(current_date=datetime(2024, 6, 15), view_mode="month")

        assert header.user_initial == "U"

    def test_serializes_computed_fields(self):
        header = Header(current_date=datetime(2024, 6, 15), view_mode="day")
        data = header.model_dump()

        assert data["title"] == "Saturday, June 15, 2024"
        assert data["view_label"] == "Day"
