from __future__ import annotations

from math import isclose

from coastfire.config import DEFAULT_PARAMETERS


def bad_params() -> dict:
    return {**DEFAULT_PARAMETERS, "currentAge": 70, "retirementAge": 65, "annualExpenses": 0, "returnRate": 0.5}


def test_validate_reports_all_errors(client):
    resp = client.post("/api/calc/validate", json=bad_params())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["valid"] is False
    assert len(body["errors"]) == 3


def test_targets_endpoint(client):
    resp = client.post("/api/calc/targets", json=DEFAULT_PARAMETERS)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["yearsToRetirement"] == 35
    assert isclose(body["traditionalFIRENumber"], 1_000_000.0)
    assert body["coastFIRENumber"] < body["futureFIRENumber"]


def test_domain_violations_return_400(client):
    resp = client.post("/api/calc/targets", json=bad_params())

    assert resp.status_code == 400
    body = resp.get_json()
    assert "Annual expenses must be greater than 0" in body["error"]
    assert len(body["error"]) == 3


def test_malformed_payload_returns_422(client):
    resp = client.post("/api/calc/targets", json={**DEFAULT_PARAMETERS, "currentAge": "thirty"})

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_unknown_fields_are_rejected(client):
    resp = client.post("/api/calc/targets", json={**DEFAULT_PARAMETERS, "currency": "USD"})

    assert resp.status_code == 422


def test_projection_endpoint_reports_non_convergence(client):
    payload = {"startingBalance": 1000, "monthlyContribution": 0, "annualReturnRate": 0.0, "target": 5000}

    resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["reachedWithinCap"] is False
    assert body["elapsedMonths"] == 1200


def test_projection_endpoint_with_inflating_target(client):
    payload = {
        "startingBalance": 0,
        "monthlyContribution": 100,
        "annualReturnRate": 0.0,
        "target": 1250,
        "options": {"inflatingTarget": True, "targetInflationRate": 0.1},
    }

    resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["elapsedMonths"] == 14


def test_comparison_endpoint_defaults_and_overrides(client):
    default_resp = client.post("/api/calc/comparison", json={"params": DEFAULT_PARAMETERS})
    custom_resp = client.post(
        "/api/calc/comparison",
        json={"params": DEFAULT_PARAMETERS, "overrides": [{"label": "Fixed 2k", "amount": 2000}]},
    )

    assert default_resp.status_code == 200
    assert len(default_resp.get_json()["rows"]) == 4
    assert custom_resp.status_code == 200
    rows = custom_resp.get_json()["rows"]
    assert rows[0]["label"] == "Fixed 2k"
    assert rows[0]["monthlyContribution"] == 2000


def test_comparison_rejects_ambiguous_override(client):
    resp = client.post(
        "/api/calc/comparison",
        json={"params": DEFAULT_PARAMETERS, "overrides": [{"label": "x", "amount": 1, "multiplier": 2}]},
    )

    assert resp.status_code == 422


def test_trajectory_endpoint_solves_coast_years(client):
    resp = client.post("/api/calc/trajectory", json={"params": DEFAULT_PARAMETERS})

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["ages"]) == 36
    assert body["coastingPhase"][0] is None
    assert body["coastYears"] > 0


def test_trajectory_endpoint_accepts_explicit_coast_years(client):
    resp = client.post("/api/calc/trajectory", json={"params": DEFAULT_PARAMETERS, "coastYears": 0})

    assert resp.status_code == 200
    assert resp.get_json()["savingsPhase"][1:] == [None] * 35


def test_coast_fire_endpoint_formats_in_requested_currency(client):
    resp = client.post(
        "/api/calc/coast-fire",
        json={"params": DEFAULT_PARAMETERS, "format": {"currency": "EUR"}},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["display"]["traditionalFIRENumber"] == "€1,000,000"
    assert body["report"]["coastProjection"]["reachedWithinCap"] is True
    assert len(body["report"]["comparison"]) == 4


def test_coast_fire_endpoint_rejects_invalid_parameters(client):
    resp = client.post("/api/calc/coast-fire", json={"params": bad_params()})

    assert resp.status_code == 400
    assert len(resp.get_json()["error"]) == 3


def test_huge_retirement_age_returns_400(client):
    resp = client.post("/api/calc/targets", json={**DEFAULT_PARAMETERS, "retirementAge": 30000})

    assert resp.status_code == 400
    assert "Retirement age cannot be greater than 120" in resp.get_json()["error"]


def test_comparison_rejects_unbounded_multiplier(client):
    resp = client.post(
        "/api/calc/comparison",
        json={"params": DEFAULT_PARAMETERS, "overrides": [{"label": "huge", "multiplier": 1e308}]},
    )

    assert resp.status_code == 422


def test_projection_rejects_total_loss_target_inflation(client):
    payload = {
        "startingBalance": 0,
        "monthlyContribution": 100,
        "annualReturnRate": 0.0,
        "target": 5000,
        "options": {"inflatingTarget": True, "targetInflationRate": -1.0},
    }

    resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 422
