"""Shared pytest fixtures and utilities for all tests."""

import os

import pytest

# Keep the OTLP exporter from reaching for a collector during tests
os.environ.setdefault("OTEL_METRICS_EXPORTER", "none")

# Skip marker for tests that talk to a running Ollama server
requires_ollama = pytest.mark.skipif(
    not os.environ.get("RUN_OLLAMA_TESTS"),
    reason="Set RUN_OLLAMA_TESTS=1 with Ollama running to enable",
)

SAMPLE_PLAN_TEXT = """# 概要
1. 移動手段（出発地から目的地まで）: 成田空港からバンコクまで飛行機で約6時間
2. 宿泊先のエリア: スクンビット周辺
3. 予算目安: 約15万円
4. 持ち物アドバイス: 日焼け止め、薄手の上着

# 詳細日程
| 日付 | 時間 | 行動 | 詳細 | 移動手段 |
|------|------|------|------|----------|
| 1日目 | 08:00 | 出発 | 成田空港へ向かう | 電車 |
| 1日目 | 19:00 | 夕食 | タイ料理レストラン | - |
| 2日目 | 09:00 | 観光 | ワット・ポーを見学 | タクシー |
| 2日目 | 12:00 | 昼食 | 屋台でパッタイ | 徒歩 |

※移動時間は目安です

# 補足情報
1. おすすめグルメスポット: チャイナタウンの屋台街
2. 気候や服装のアドバイス: 高温多湿のため通気性の良い服装
3. 現地での注意点: 寺院では肌の露出を控える
"""


@pytest.fixture
def sample_plan_text() -> str:
    """A well-formed two-day plan as the LLM is asked to produce it."""
    return SAMPLE_PLAN_TEXT
