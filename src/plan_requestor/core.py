"""
Plan Requestor

Builds the fixed Japanese prompts from the trip parameters and asks the LLM
for a plan. When a budget is given, a second call produces a budget
breakdown that is appended under BUDGET_PLAN_HEADING.
"""

from dataclasses import dataclass

from common.config import BUDGET_PLAN_HEADING
from common.llm_utils import get_ai_response
from common.logging_config import get_logger

logger = get_logger("plan_requestor")

INVALID_INPUT_MESSAGE = "すべての項目を入力してください。日数は1以上の数値を入力してください。"


@dataclass
class TravelPlanInput:
    """Trip parameters collected from the traveler."""

    origin: str
    destination: str
    duration: int
    budget: int | None = None


def validate_travel_input(travel_input: TravelPlanInput) -> str | None:
    """Return an error message when a required field is missing, else None."""
    if not travel_input.origin or not travel_input.destination:
        return INVALID_INPUT_MESSAGE
    if not isinstance(travel_input.duration, int) or travel_input.duration <= 0:
        return INVALID_INPUT_MESSAGE
    return None


def get_planning_prompt(origin: str, destination: str, duration: int) -> str:
    """Prompt for the base itinerary in the three-section format the parser reads."""
    return f"""
あなたは旅行プランナーです。以下の条件に基づいて詳細な旅行プランを作成してください：

出発地: {origin}
目的地: {destination}
旅行日数: {duration}日

以下の形式で出力してください。フォーマットは厳密に守ってください：

# 概要
1. 移動手段（出発地から目的地まで）: [説明を記載]
2. 宿泊先のエリア: [説明を記載]
3. 予算目安: [説明を記載]
4. 持ち物アドバイス: [説明を記載]

# 詳細日程
| 日付 | 時間 | 行動 | 詳細 | 移動手段 |
|------|------|------|------|----------|
| 1日目 | 08:00 | [行動] | [詳細] | [移動手段] |
| 1日目 | 10:00 | [行動] | [詳細] | [移動手段] |
| 1日目 | 12:00 | [行動] | [詳細] | [移動手段] |
| 1日目 | 15:00 | [行動] | [詳細] | [移動手段] |
| 1日目 | 19:00 | [行動] | [詳細] | [移動手段] |

※上記のフォーマットを各日について繰り返してください。
※各日は必ず以下の時間帯の予定を含めてください：
1. 朝の予定（07:00-09:00）
   - 起床・朝食
   - 初日の場合は出発準備・移動
   - 最終日の場合は帰国準備・移動
2. 午前の予定（09:00-12:00）
   - 観光、アクティビティ、移動など
3. 昼食の予定（12:00-14:00）
   - 現地のグルメ、レストラン、屋台など
4. 午後の予定（14:00-18:00）
   - 観光、ショッピング、体験など
5. 夜の予定（18:00-22:00）
   - 夕食、ナイトマーケット、休息など

※時間は24時間表記で記載してください（例: 09:00, 14:30）
※移動手段が不要な場合は「-」と記載してください
※各予定には具体的な説明を含めてください
※1日5つの予定を必ず記載してください

# 補足情報
1. おすすめグルメスポット: [説明を記載]
2. 気候や服装のアドバイス: [説明を記載]
3. 現地での注意点: [説明を記載]
"""


def get_budget_optimization_prompt(original_plan: str, budget: int) -> str:
    """Prompt for a budget breakdown of an already generated plan."""
    return f"""
以下の旅行プランに対して、予算の最適化と詳細な内訳を提案してください。

旅行プラン:
{original_plan}

予算目安: {budget}円

以下の形式で予算の最適化案を出力してください：

# 予算内訳
1. 交通費
  - 航空券/移動手段
  - 現地交通費
2. 宿泊費
  - ホテルグレード
  - 宿泊エリア
3. 食費
  - 朝食
  - 昼食
  - 夕食
4. アクティビティ費用
  - 観光スポット入場料
  - オプショナルツアー
5. その他経費
  - お土産
  - 予備費

# 最適化提案
※予算に応じた具体的な提案を記載してください
※コストパフォーマンスを考慮した選択肢を提示してください
※予算超過の場合は、調整案を提示してください

# 総評
※予算の実現可能性について評価してください
※季節による価格変動についても言及してください
"""


def merge_budget_plan(base_plan: str, budget_plan: str) -> str:
    """Append the budget breakdown to the base plan under the joining heading."""
    return f"{base_plan}\n\n{BUDGET_PLAN_HEADING}\n{budget_plan}"


def generate_plan(travel_input: TravelPlanInput) -> str:
    """
    Ask the LLM for a travel plan.

    Args:
        travel_input: Trip parameters; budget triggers the second call

    Returns:
        Raw plan text, with the budget breakdown appended when requested
    """
    logger.info(
        f"Generating plan: {travel_input.origin} -> {travel_input.destination}, "
        f"{travel_input.duration} days, budget={travel_input.budget}"
    )
    prompt = get_planning_prompt(
        travel_input.origin, travel_input.destination, travel_input.duration
    )
    base_plan = get_ai_response([{"role": "user", "content": prompt}], caller="generate_plan")

    if not travel_input.budget:
        return base_plan

    logger.info("Budget given, requesting budget optimization")
    budget_prompt = get_budget_optimization_prompt(base_plan, travel_input.budget)
    budget_plan = get_ai_response(
        [{"role": "user", "content": budget_prompt}], caller="optimize_budget"
    )
    return merge_budget_plan(base_plan, budget_plan)
