from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from constants import EXAMPLE_NUMBERS, MAX_LOTTERY_TOTAL, MAX_SYSTEMS
from webapi.app import app

client = TestClient(app)


def _request(**overrides):
    body = {
        "total": 49,
        "selected": 6,
        "odds": {"1": 7.75, "2": 70.0, "3": 700, "4": 8400, "5": 210000},
        "numbers": list(EXAMPLE_NUMBERS),
        "stake": 1.0,
        "systems": [1, 2, 3],
    }
    body.update(overrides)
    return body


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_post_betslip():
    r = client.post("/betslip", json=_request())
    assert r.status_code == 200
    data = r.json()
    assert data["version"] == "v1"
    assert data["total_tickets"] == 575
    assert data["stake_per_ticket"] == pytest.approx(1 / 575)
    assert [o["hit"] for o in data["outcomes"]] == [1, 2, 3, 4, 5, 6]

    three = data["outcomes"][2]
    assert [c["combinations"] for c in three["contributing_combinations"]] == [3, 3, 1]
    assert three["total_winning_combinations"] == 7
    assert three["payout"] == pytest.approx(933.25 / 575)
    assert "generated_at" in data["meta"]


def test_post_betslip_invalid_system():
    r = client.post("/betslip", json=_request(numbers=[1, 2, 3], systems=[5]))
    assert r.status_code == 422
    assert r.json()["error"] == "InvalidParameterError"


def test_post_betslip_missing_odds():
    r = client.post("/betslip", json=_request(odds={"2": 70.0, "3": 700.0}))
    assert r.status_code == 422
    assert r.json()["error"] == "MissingOddsError"


def test_post_betslip_without_systems():
    r = client.post("/betslip", json=_request(systems=[]))
    assert r.status_code == 422
    assert r.json()["error"] == "EmptySystemsError"


def test_post_betslip_rejects_unknown_fields():
    r = client.post("/betslip", json=_request(currency="EUR"))
    assert r.status_code == 422


def test_example_uses_env_stake(monkeypatch):
    monkeypatch.setenv("LOTOBETSLIP_STAKE", "575")
    r = client.get("/betslip/example")
    assert r.status_code == 200
    data = r.json()
    assert data["stake"] == 575.0
    assert data["stake_per_ticket"] == pytest.approx(1.0)


def test_example_txt():
    r = client.get("/betslip/example.txt")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert "HIT=6" in r.text
    assert "apuestas virtuales: 575" in r.text


@pytest.mark.parametrize("odds", [{"1": "NaN"}, {"1": 7.75, "2": "Infinity"}])
def test_post_betslip_non_finite_odds(odds):
    r = client.post("/betslip", json=_request(odds=odds))
    assert r.status_code == 422


def test_post_betslip_non_finite_stake():
    r = client.post("/betslip", json=_request(stake="Infinity"))
    assert r.status_code == 422


@pytest.mark.parametrize("overrides", [
    {"total": 400000, "selected": 40000, "numbers": [1, 2], "systems": [1]},
    {"total": MAX_LOTTERY_TOTAL + 1},
    {"numbers": list(range(1, MAX_LOTTERY_TOTAL + 2))},
    {"systems": list(range(1, MAX_SYSTEMS + 2))},
])
def test_post_betslip_oversized_request(overrides):
    r = client.post("/betslip", json=_request(**overrides))
    assert r.status_code == 422


def test_post_betslip_largest_lottery_allowed():
    body = _request(total=MAX_LOTTERY_TOTAL, selected=MAX_LOTTERY_TOTAL // 2,
                    numbers=list(range(1, 21)), systems=[1, 2, 3])
    r = client.post("/betslip", json=body)
    assert r.status_code == 200
    assert [o["hit"] for o in r.json()["outcomes"]] == list(range(1, 21))
