"""Tests for the dice HTTP routes."""

from __future__ import annotations

from unittest.mock import patch

from dicelab.config import settings


async def test_parse_returns_canonical_groups(async_client):
    resp = await async_client.post("/dice/parse", json={"notation": " d6 ,2D8-1,"})
    assert resp.status_code == 200
    assert resp.json() == {
        "canonical": "1d6,2d8-1",
        "groups": [
            {"count": 1, "sides": 6, "modifier": 0},
            {"count": 2, "sides": 8, "modifier": -1},
        ],
    }


async def test_parse_invalid_is_422(async_client):
    resp = await async_client.post("/dice/parse", json={"notation": "2d0"})
    assert resp.status_code == 422
    assert "Sides must be positive" in resp.json()["detail"]


async def test_roll_in_range(async_client):
    resp = await async_client.post("/dice/roll", json={"notation": "2d6+2,3d10, 8d10+6"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["canonical"] == "2d6+2,3d10,8d10+6"
    assert 21 <= data["total"] <= 130


async def test_roll_seeded_is_repeatable(async_client):
    body = {"notation": "4d20", "seed": 99}
    first = await async_client.post("/dice/roll", json=body)
    second = await async_client.post("/dice/roll", json=body)
    assert first.json()["total"] == second.json()["total"]


async def test_roll_invalid_is_422(async_client):
    resp = await async_client.post("/dice/roll", json={"notation": ",,,"})
    assert resp.status_code == 422


async def test_simulate_counts_sum_to_trials(async_client):
    resp = await async_client.post(
        "/dice/simulate", json={"notation": "2d6", "trials": 2000, "seed": 5}
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["trials"] == 2000
    assert sum(row["count"] for row in data["distribution"]) == 2000
    values = [row["value"] for row in data["distribution"]]
    assert values == sorted(values)
    assert 2 <= data["minimum"] <= data["maximum"] <= 12


async def test_simulate_zero_trials(async_client):
    resp = await async_client.post("/dice/simulate", json={"notation": "1d6", "trials": 0})
    assert resp.status_code == 200
    data = resp.json()
    assert data["distribution"] == []
    assert data["mean"] is None


async def test_simulate_negative_trials_rejected(async_client):
    resp = await async_client.post("/dice/simulate", json={"notation": "1d6", "trials": -1})
    assert resp.status_code == 422


async def test_simulate_too_many_trials(async_client):
    with patch.object(settings, "max_trials", 10):
        resp = await async_client.post("/dice/simulate", json={"notation": "1d6", "trials": 11})
    assert resp.status_code == 422
    assert "Too many trials" in resp.json()["detail"]


async def test_distribution_page(async_client):
    resp = await async_client.get("/dice/distribution", params={"notation": "1d1+2", "trials": 10})
    assert resp.status_code == 200
    assert "1d1+2" in resp.text
    assert "1.00000" in resp.text


async def test_distribution_page_invalid(async_client):
    resp = await async_client.get("/dice/distribution", params={"notation": "abc"})
    assert resp.status_code == 422
    assert "Missing dice separator" in resp.text


async def test_roll_too_many_dice(async_client):
    with patch.object(settings, "max_dice", 100):
        resp = await async_client.post("/dice/roll", json={"notation": "60d6,41d4"})
    assert resp.status_code == 422
    assert "Too many dice: 101" in resp.json()["detail"]


async def test_roll_huge_count_rejected(async_client):
    resp = await async_client.post("/dice/roll", json={"notation": "3000000d6"})
    assert resp.status_code == 422
    assert "Too many dice" in resp.json()["detail"]


async def test_simulate_too_many_draws(async_client):
    with patch.object(settings, "max_draws", 1000):
        resp = await async_client.post(
            "/dice/simulate", json={"notation": "10d6", "trials": 101}
        )
    assert resp.status_code == 422
    assert "Simulation too large" in resp.json()["detail"]


async def test_distribution_page_too_many_dice(async_client):
    resp = await async_client.get(
        "/dice/distribution", params={"notation": "5000d6", "trials": 1}
    )
    assert resp.status_code == 422
