"""Tests for unified_app.formatting module."""

from conftest import SAMPLE_PLAN_TEXT
from orchestrator.core import PlanContext, run_parser
from plan_parser.types import AdditionalInfo, DaySchedule, OverviewInfo, ScheduleEntry
from plan_requestor.core import TravelPlanInput, merge_budget_plan
from unified_app.formatting import (
    format_additional,
    format_day_schedule,
    format_error_for_display,
    format_overview,
    format_plan,
    format_progress,
)


def _parsed_context(raw_text: str = SAMPLE_PLAN_TEXT, duration: int = 2) -> PlanContext:
    travel_input = TravelPlanInput(origin="日本", destination="タイ", duration=duration)
    return run_parser(PlanContext(travel_input=travel_input, raw_text=raw_text))


class TestFormatProgress:
    """Tests for format_progress function."""

    def test_dots_cycle(self):
        """Dots grow to three and then reset."""
        assert format_progress(0) == "旅行プランを考え中"
        assert format_progress(1) == "旅行プランを考え中."
        assert format_progress(3) == "旅行プランを考え中..."
        assert format_progress(4) == "旅行プランを考え中"


class TestFormatSections:
    """Tests for the overview and supplementary renderers."""

    def test_overview_strips_keyword_separator(self):
        """The leftover ': ' after the keyword is not displayed."""
        text = format_overview(OverviewInfo(transportation=": 飛行機", budget="：10万円"))
        assert "### 移動手段\n飛行機" in text
        assert "### 予算目安\n10万円" in text

    def test_missing_values_render_as_dash(self):
        """Empty fields show a placeholder."""
        text = format_additional(AdditionalInfo())
        assert "### おすすめグルメスポット\n-" in text
        assert "### 注意点\n-" in text


class TestFormatDaySchedule:
    """Tests for format_day_schedule function."""

    def test_renders_table(self):
        """Entries become markdown table rows without the day column."""
        day = DaySchedule(
            day=1,
            label="1日目",
            entries=[ScheduleEntry("1日目", "08:00", "出発", "空港へ", "電車")],
        )
        lines = format_day_schedule(day).splitlines()
        assert lines[0] == "### 1日目"
        assert lines[1] == "| 時間 | 行動 | 詳細 | 移動手段 |"
        assert lines[3] == "| 08:00 | 出発 | 空港へ | 電車 |"

    def test_missing_cells_render_empty(self):
        """None cells from short rows render as blanks."""
        day = DaySchedule(day=3, label="3日目", entries=[ScheduleEntry("3日目", "10:00", "観光", None, None)])
        assert "| 10:00 | 観光 |  |  |" in format_day_schedule(day)

    def test_empty_day(self):
        """A day without entries says so."""
        assert format_day_schedule(DaySchedule(day=2, label="2日目")) == "### 2日目\n予定がありません"


class TestFormatPlan:
    """Tests for format_plan function."""

    def test_without_parsed_plan(self):
        """Nothing to show before the parser ran."""
        assert format_plan(PlanContext()) == "プランがまだ生成されていません。"

    def test_full_plan(self):
        """All sections appear in display order."""
        text = format_plan(_parsed_context())
        assert text.index("## 旅行の概要") < text.index("## 詳細日程") < text.index("## 補足情報")
        assert "### 1日目" in text and "### 2日目" in text
        assert "| 09:00 | 観光 | ワット・ポーを見学 | タクシー |" in text
        assert "チャイナタウンの屋台街" in text
        assert "予算最適化プラン" not in text

    def test_budget_block_shown(self):
        """A budget breakdown is appended at the end."""
        raw = merge_budget_plan(SAMPLE_PLAN_TEXT, "# 予算内訳\n1. 交通費: 6万円")
        text = format_plan(_parsed_context(raw))
        assert text.rstrip().endswith("# 予算内訳\n1. 交通費: 6万円")
        assert "## 予算最適化プラン" in text

    def test_unassigned_rows_mentioned(self):
        """Rows outside the trip are counted in a note."""
        text = format_plan(_parsed_context(duration=1))
        assert "日付を判別できない予定が2件あります" in text


class TestFormatErrorForDisplay:
    """Tests for format_error_for_display function."""

    def test_empty_error(self):
        """Empty errors get the generic message."""
        assert "予期しないエラー" in format_error_for_display("")

    def test_invalid_input(self):
        """Validation failures repeat the form instructions."""
        message = format_error_for_display("Invalid travel_input: ...")
        assert message.startswith("すべての項目を入力してください")

    def test_llm_failure(self):
        """LLM failures never leak the raw exception."""
        message = format_error_for_display("LLM request failed: [Errno 111] /usr/lib/python3")
        assert "Errno" not in message
        assert "プランの生成中にエラー" in message

    def test_unknown_error(self):
        """Unknown errors get the generic message."""
        assert "予期しないエラー" in format_error_for_display("something odd")
