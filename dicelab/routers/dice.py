"""Dice routes: parse, roll and simulate notation over JSON, plus an HTML histogram."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse
from starlette.requests import Request

from dicelab.config import settings
from dicelab.dice import DieGroup, parse, render
from dicelab.engine import bounds, evaluate, make_rng, simulate
from dicelab.rendering import templates
from dicelab.report import distribution_rows, summarize
from dicelab.schemas import (
    DieGroupOut,
    NotationRequest,
    OutcomeCount,
    ParseResponse,
    RollRequest,
    RollResponse,
    SimulateRequest,
    SimulateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dice")


def _groups_or_422(notation: str) -> tuple[DieGroup, ...]:
    result = parse(notation)
    if not result.ok:
        raise HTTPException(status_code=422, detail=str(result.error))
    return result.groups


def _check_dice(groups: tuple[DieGroup, ...]) -> int:
    dice = sum(g.count for g in groups)
    if dice > settings.max_dice:
        raise HTTPException(
            status_code=422,
            detail=f"Too many dice: {dice} (max {settings.max_dice})",
        )
    return dice


def _check_trials(groups: tuple[DieGroup, ...], trials: int) -> None:
    if trials > settings.max_trials:
        raise HTTPException(
            status_code=422,
            detail=f"Too many trials: {trials} (max {settings.max_trials})",
        )
    draws = _check_dice(groups) * trials
    if draws > settings.max_draws:
        raise HTTPException(
            status_code=422,
            detail=f"Simulation too large: {draws} dice rolls (max {settings.max_draws})",
        )


@router.post("/parse", response_model=ParseResponse)
async def parse_notation(body: NotationRequest) -> ParseResponse:
    groups = _groups_or_422(body.notation)
    return ParseResponse(
        canonical=render(groups),
        groups=[DieGroupOut.from_group(g) for g in groups],
    )


@router.post("/roll", response_model=RollResponse)
async def roll_notation(body: RollRequest) -> RollResponse:
    groups = _groups_or_422(body.notation)
    _check_dice(groups)
    total = evaluate(groups, make_rng(body.seed))
    return RollResponse(notation=body.notation, canonical=render(groups), total=total)


@router.post("/simulate", response_model=SimulateResponse)
async def simulate_notation(body: SimulateRequest) -> SimulateResponse:
    groups = _groups_or_422(body.notation)
    trials = settings.default_trials if body.trials is None else body.trials
    _check_trials(groups, trials)
    distribution = simulate(groups, trials, make_rng(body.seed))
    summary = summarize(distribution)
    return SimulateResponse(
        canonical=render(groups),
        trials=trials,
        minimum=summary.minimum if summary else None,
        maximum=summary.maximum if summary else None,
        mean=summary.mean if summary else None,
        distribution=[
            OutcomeCount(value=value, count=count, probability=count / trials)
            for value, count in sorted(distribution.items())
        ],
    )


@router.get("/distribution", response_class=HTMLResponse)
async def distribution_page(
    request: Request, notation: str, trials: int | None = None
) -> HTMLResponse:
    result = parse(notation)
    if not result.ok:
        return templates.TemplateResponse(
            request,
            "distribution.html",
            {"notation": notation, "error": str(result.error)},
            status_code=422,
        )
    groups = result.groups
    trials = settings.default_trials if trials is None else trials
    if trials < 0:
        raise HTTPException(status_code=422, detail="Trials must be non-negative")
    _check_trials(groups, trials)
    distribution = simulate(groups, trials, make_rng())
    low, high = bounds(groups)
    return templates.TemplateResponse(
        request,
        "distribution.html",
        {
            "notation": notation,
            "canonical": render(groups),
            "trials": trials,
            "low": low,
            "high": high,
            "summary": summarize(distribution),
            "rows": distribution_rows(distribution, trials, settings.histogram_width),
        },
    )
