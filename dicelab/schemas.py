"""Pydantic request and response models for the dice HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dicelab.dice import DieGroup


class NotationRequest(BaseModel):
    notation: str = Field(description="Dice notation, e.g. '2d6+2,3d10'.")


class RollRequest(NotationRequest):
    seed: int | None = Field(default=None, description="Fix the random source for a repeatable roll.")


class SimulateRequest(RollRequest):
    trials: int | None = Field(
        default=None,
        ge=0,
        description="Number of trials; the configured default is used when omitted.",
    )


class DieGroupOut(BaseModel):
    count: int
    sides: int
    modifier: int

    @classmethod
    def from_group(cls, group: DieGroup) -> DieGroupOut:
        return cls(count=group.count, sides=group.sides, modifier=group.modifier)


class ParseResponse(BaseModel):
    canonical: str
    groups: list[DieGroupOut]


class RollResponse(BaseModel):
    notation: str
    canonical: str
    total: int


class OutcomeCount(BaseModel):
    value: int
    count: int
    probability: float


class SimulateResponse(BaseModel):
    canonical: str
    trials: int
    minimum: int | None
    maximum: int | None
    mean: float | None
    distribution: list[OutcomeCount]
