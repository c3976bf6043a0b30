import argparse

import rich
from rich.markdown import Markdown

from common.config import (
    DEFAULT_DESTINATION,
    DEFAULT_DURATION,
    DEFAULT_ORIGIN,
    PROGRESS_MESSAGE,
)
from common.logging_config import configure_logging, get_logger
from orchestrator.core import run_full_pipeline
from plan_requestor.core import TravelPlanInput
from unified_app.formatting import format_error_for_display, format_plan

logger = get_logger("travel_planner_agent")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LLMで旅行プランを作成します")
    parser.add_argument("--origin", default=DEFAULT_ORIGIN, help="出発地")
    parser.add_argument("--destination", default=DEFAULT_DESTINATION, help="目的地")
    parser.add_argument("--duration", type=int, default=DEFAULT_DURATION, help="旅行日数")
    parser.add_argument("--budget", type=int, default=None, help="予算（円）")
    parser.add_argument(
        "--structured",
        action="store_true",
        help="生の出力ではなく、解析した旅程を表示する",
    )
    parser.add_argument("--strict", action="store_true", help="列が不足した行を除外する")
    parser.add_argument("--verbose", "-v", action="store_true", help="LLMとのやり取りをログに出す")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    if args.verbose:
        configure_logging("DEBUG")
    # Same console as RichHandler
    console = rich.get_console()

    travel_input = TravelPlanInput(
        origin=args.origin,
        destination=args.destination,
        duration=args.duration,
        budget=args.budget,
    )
    console.print(
        f"入力値：\n出発地: {travel_input.origin}\n目的地: {travel_input.destination}\n"
        f"旅行日数: {travel_input.duration}日\n"
    )

    with console.status(PROGRESS_MESSAGE):
        ctx = run_full_pipeline(travel_input, strict=args.strict)

    if ctx.error:
        logger.error(f"Plan generation failed: {ctx.error}")
        console.print(f"エラーが発生しました: {format_error_for_display(ctx.error)}")
        return 1

    console.print("=== 旅行プラン ===\n")
    if args.structured:
        console.print(Markdown(format_plan(ctx)))
    else:
        console.print(ctx.raw_text, markup=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
