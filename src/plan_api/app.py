"""
HTTP endpoint for plan generation.

POST /api/generate-plan returns the raw, unparsed plan text; parsing
happens on the client side.

Run with: uvicorn plan_api.app:app
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.logging_config import get_logger
from plan_requestor.core import TravelPlanInput, generate_plan

logger = get_logger("plan_api")

app = FastAPI(title="旅行プランナー")


class GeneratePlanRequest(BaseModel):
    origin: str
    destination: str
    duration: int
    budget: int | None = None


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content={"message": "Method not allowed"})
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})


@app.post("/api/generate-plan")
def generate_plan_endpoint(body: GeneratePlanRequest):
    travel_input = TravelPlanInput(
        origin=body.origin,
        destination=body.destination,
        duration=body.duration,
        budget=body.budget,
    )
    try:
        content = generate_plan(travel_input)
    except Exception as e:
        logger.error(f"Error generating plan: {e}")
        return JSONResponse(status_code=500, content={"message": "Error generating travel plan"})
    return {"content": content}
