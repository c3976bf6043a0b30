"""
Centralized configuration for the travel itinerary planner.
All tunable constants and settings are defined here.
"""

# LLM settings
LLM_MODEL: str = "qwen3:8b"

# LLM model parameters (Ollama options)
# Context window size - the base plan is echoed back into the budget prompt
LLM_NUM_CTX: int = 8192

# Temperature - itineraries benefit from some variety
LLM_TEMPERATURE: float = 0.7

# Top-p (nucleus sampling)
LLM_TOP_P: float = 0.9

# Top-k sampling - limits token choices
LLM_TOP_K: int = 40

# Number of tokens to predict (-1 = infinite, -2 = fill context)
LLM_NUM_PREDICT: int = -1

# System prompt prepended to every call (optional, set to None to disable)
LLM_SYSTEM_PROMPT: str | None = None

# Default trip used by the CLI and the web form
DEFAULT_ORIGIN: str = "日本"
DEFAULT_DESTINATION: str = "タイ"
DEFAULT_DURATION: int = 5
DEFAULT_BUDGET: int = 200000

# Heading that joins the base plan and the budget breakdown
BUDGET_PLAN_HEADING: str = "# 予算最適化プラン"

# Loading animation
PROGRESS_MESSAGE: str = "旅行プランを考え中"
PROGRESS_INTERVAL_SECONDS: float = 1.0
PROGRESS_MAX_DOTS: int = 3
