"""Tests for unified_app.orchestration module."""

import pytest

import unified_app.orchestration as orchestration
from common.config import DEFAULT_BUDGET, DEFAULT_DESTINATION, DEFAULT_DURATION, DEFAULT_ORIGIN
from orchestrator.core import PlanContext
from plan_requestor.core import INVALID_INPUT_MESSAGE, TravelPlanInput
from unified_app.orchestration import FORM_FIELDS, INVALID_BUDGET_MESSAGE, build_travel_input, plan_trip


class TestFormFields:
    """Tests for the FORM_FIELDS configuration."""

    def test_asks_for_every_trip_parameter(self):
        """The form covers origin, destination, duration and budget."""
        assert [f.name for f in FORM_FIELDS] == ["origin", "destination", "duration", "budget"]

    def test_fields_have_question_and_default(self):
        """Each field has a question and a default."""
        for form_field in FORM_FIELDS:
            assert form_field.question
            assert form_field.default


class TestBuildTravelInput:
    """Tests for build_travel_input function."""

    def test_blank_answers_use_defaults(self):
        """Blank or missing answers fall back to the defaults."""
        travel_input = build_travel_input({"origin": "  ", "destination": ""})
        assert travel_input == TravelPlanInput(
            origin=DEFAULT_ORIGIN,
            destination=DEFAULT_DESTINATION,
            duration=DEFAULT_DURATION,
            budget=DEFAULT_BUDGET,
        )

    def test_parses_numbers(self):
        """Units and thousands separators are tolerated."""
        travel_input = build_travel_input(
            {"origin": "大阪", "destination": "台北", "duration": "3日", "budget": "150,000円"}
        )
        assert travel_input == TravelPlanInput("大阪", "台北", 3, 150000)

    def test_zero_budget_means_none(self):
        """A budget of 0 disables the budget breakdown."""
        assert build_travel_input({"budget": "0"}).budget is None

    def test_man_unit_budget(self):
        """Budgets written with 万 are expanded to yen."""
        assert build_travel_input({"budget": "20万円"}).budget == 200000
        assert build_travel_input({"budget": "20万"}).budget == 200000
        assert build_travel_input({"budget": "1.5万円"}).budget == 15000

    def test_duration_with_nichikan(self):
        """Durations written as N日間 are accepted."""
        assert build_travel_input({"duration": "5日間"}).duration == 5

    def test_unparsable_budget_is_rejected(self):
        """A budget that is not a number is reported, not dropped."""
        with pytest.raises(ValueError) as exc_info:
            build_travel_input({"budget": "たくさん"})
        assert str(exc_info.value) == INVALID_BUDGET_MESSAGE

    def test_unparsable_duration_is_rejected(self):
        """A duration that is not a number gives the input error message."""
        with pytest.raises(ValueError) as exc_info:
            build_travel_input({"duration": "たくさん"})
        assert str(exc_info.value) == INVALID_INPUT_MESSAGE


class TestPlanTrip:
    """Tests for plan_trip function."""

    def test_delegates_to_pipeline(self, monkeypatch):
        """plan_trip runs the full pipeline for the input."""
        seen = []

        def fake_pipeline(travel_input):
            seen.append(travel_input)
            return PlanContext(travel_input=travel_input, error="LLM request failed: x")

        monkeypatch.setattr(orchestration, "run_full_pipeline", fake_pipeline)
        travel_input = TravelPlanInput("日本", "タイ", 5)
        ctx = plan_trip(travel_input)
        assert seen == [travel_input]
        assert ctx.error == "LLM request failed: x"
