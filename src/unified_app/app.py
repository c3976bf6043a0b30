"""
Chainlit Application for the Travel Itinerary Planner.

Asks for origin, destination, duration and budget, generates the plan with
a loading animation and shows the rendered itinerary.

All business logic is delegated to the orchestration adapter layer.
"""

import asyncio
import contextlib

import chainlit as cl

from common.config import PROGRESS_INTERVAL_SECONDS
from common.logging_config import get_logger
from unified_app.formatting import format_error_for_display, format_plan, format_progress
from unified_app.orchestration import FORM_FIELDS, build_travel_input, plan_trip

logger = get_logger("unified_app")

# Constants
ASK_TIMEOUT_SECONDS = 300
RESTART_MESSAGE = "別の旅行プランを作成するには、何かメッセージを送信してください。"


async def _animate_progress(msg: cl.Message) -> None:
    """Update the loading message once per interval until cancelled."""
    tick = 0
    while True:
        await asyncio.sleep(PROGRESS_INTERVAL_SECONDS)
        tick += 1
        msg.content = format_progress(tick)
        await msg.update()


async def _collect_answers() -> dict[str, str] | None:
    """Ask every form question in turn; None if the user stops answering."""
    answers: dict[str, str] = {}
    for form_field in FORM_FIELDS:
        res = await cl.AskUserMessage(
            content=f"{form_field.question}（既定値: {form_field.default}）",
            timeout=ASK_TIMEOUT_SECONDS,
        ).send()
        if res is None:
            logger.debug(f"No answer for '{form_field.name}', aborting")
            return None
        answers[form_field.name] = res["output"]
    return answers


async def _collect_and_plan() -> None:
    answers = await _collect_answers()
    if answers is None:
        await cl.Message(content=RESTART_MESSAGE).send()
        return

    try:
        travel_input = build_travel_input(answers)
    except ValueError as e:
        logger.info(f"Rejected form answers: {e}")
        await cl.Message(content=str(e)).send()
        await cl.Message(content=RESTART_MESSAGE).send()
        return
    logger.debug(f"Travel input: {travel_input}")

    progress_msg = cl.Message(content=format_progress(0))
    await progress_msg.send()
    progress_task = asyncio.create_task(_animate_progress(progress_msg))

    try:
        ctx = await cl.make_async(plan_trip)(travel_input)
    finally:
        progress_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await progress_task
        await progress_msg.remove()

    if ctx.error:
        logger.warning(f"Plan generation failed: {ctx.error}")
        await cl.Message(content=format_error_for_display(ctx.error)).send()
    else:
        await cl.Message(content=format_plan(ctx)).send()

    await cl.Message(content=RESTART_MESSAGE).send()


@cl.on_chat_start
async def start():
    """Greet the traveler and start collecting the trip parameters."""
    logger.debug("Starting planner session")
    await cl.Message(content="# 旅行プランナー\n旅行の条件を教えてください。").send()
    await _collect_and_plan()


@cl.on_message
async def on_message(message: cl.Message):
    """Any message starts a new plan."""
    logger.debug(f"Received message: {message.content[:50]}...")
    await _collect_and_plan()
