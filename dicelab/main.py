from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from starlette.requests import Request

from dicelab.config import settings
from dicelab.rendering import templates
from dicelab.routers import dice

app = FastAPI(title="Dicelab", debug=settings.debug)

app.include_router(dice.router)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request, "index.html", {"default_trials": settings.default_trials}
    )
