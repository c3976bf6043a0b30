"""Tests for the travel_planner_agent command line entry point."""

import io

import rich
from rich.console import Console

import travel_planner_agent
from conftest import SAMPLE_PLAN_TEXT
from orchestrator.core import PlanContext, run_parser


def _install_pipeline(monkeypatch, error: str | None = None) -> list:
    seen = []

    def fake_pipeline(travel_input, strict=False):
        seen.append((travel_input, strict))
        ctx = PlanContext(travel_input=travel_input)
        if error:
            ctx.error = error
            return ctx
        ctx.raw_text = SAMPLE_PLAN_TEXT
        return run_parser(ctx, strict=strict)

    monkeypatch.setattr(travel_planner_agent, "run_full_pipeline", fake_pipeline)
    return seen


class TestMain:
    """Tests for main function."""

    def test_defaults(self, monkeypatch, capsys):
        """Without options the default trip is planned and the raw text printed."""
        seen = _install_pipeline(monkeypatch)
        assert travel_planner_agent.main([]) == 0
        travel_input, strict = seen[0]
        assert (travel_input.origin, travel_input.destination, travel_input.duration) == ("日本", "タイ", 5)
        assert travel_input.budget is None
        assert strict is False
        out = capsys.readouterr().out
        assert "=== 旅行プラン ===" in out
        assert "| 1日目 | 08:00 | 出発 | 成田空港へ向かう | 電車 |" in out

    def test_options_forwarded(self, monkeypatch):
        """Command line options reach the pipeline."""
        seen = _install_pipeline(monkeypatch)
        argv = ["--origin", "大阪", "--destination", "台北", "--duration", "3", "--budget", "80000", "--strict"]
        travel_planner_agent.main(argv)
        travel_input, strict = seen[0]
        assert (travel_input.origin, travel_input.destination, travel_input.duration) == ("大阪", "台北", 3)
        assert travel_input.budget == 80000
        assert strict is True

    def test_structured_output(self, monkeypatch, capsys):
        """--structured prints the rendered itinerary."""
        _install_pipeline(monkeypatch)
        assert travel_planner_agent.main(["--duration", "2", "--structured"]) == 0
        out = capsys.readouterr().out
        assert "1日目" in out
        assert "チャイナタウンの屋台街" in out

    def test_error_exit_code(self, monkeypatch, capsys):
        """Pipeline errors print a friendly message and exit non-zero."""
        _install_pipeline(monkeypatch, error="LLM request failed: connection refused")
        assert travel_planner_agent.main([]) == 1
        assert "プランの生成中にエラー" in capsys.readouterr().out

    def test_prints_through_shared_console(self, monkeypatch):
        """Output goes through rich's global console, the one RichHandler logs to."""
        _install_pipeline(monkeypatch)
        shared = Console(file=io.StringIO(), width=120)
        monkeypatch.setattr(rich, "get_console", lambda: shared)
        assert travel_planner_agent.main([]) == 0
        assert "=== 旅行プラン ===" in shared.file.getvalue()
