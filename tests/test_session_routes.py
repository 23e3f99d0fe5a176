from fastapi.testclient import TestClient

from main import app


client = TestClient(app)


def test_add_loan_to_comparison():
    resp = client.post("/session/comparison", json={
        "state": {"comparisonList": ["in-nabard-kcc"]},
        "action": "add",
        "loanId": "in-mudra-shishu",
    })

    assert resp.status_code == 200
    assert resp.json() == {
        "comparisonList": ["in-nabard-kcc", "in-mudra-shishu"],
        "savedLoans": [],
        "userProfile": None,
    }


def test_add_unknown_loan_is_404():
    resp = client.post("/session/comparison", json={"action": "add", "loanId": "missing"})

    assert resp.status_code == 404


def test_comparison_full_is_400():
    full = ["in-mudra-shishu", "in-standup-india", "in-sbi-sme-smart-score", "in-nabard-kcc"]

    resp = client.post("/session/comparison", json={
        "state": {"comparisonList": full},
        "action": "add",
        "loanId": "us-sba-7a",
    })

    assert resp.status_code == 400


def test_remove_works_for_ids_outside_catalog():
    resp = client.post("/session/comparison", json={
        "state": {"comparisonList": ["retired-loan", "in-mudra-shishu"]},
        "action": "remove",
        "loanId": "retired-loan",
    })

    assert resp.json()["comparisonList"] == ["in-mudra-shishu"]


def test_missing_loan_id_is_400():
    resp = client.post("/session/saved", json={"action": "add"})

    assert resp.status_code == 400


def test_saved_loans_clear():
    resp = client.post("/session/saved", json={
        "state": {"savedLoans": ["in-mudra-shishu"], "comparisonList": ["in-nabard-kcc"]},
        "action": "clear",
    })

    assert resp.json()["savedLoans"] == []
    assert resp.json()["comparisonList"] == ["in-nabard-kcc"]


def test_remember_profile():
    profile = {
        "age": 30,
        "income": 600000,
        "creditScore": 750,
        "organizationType": "sme",
        "businessAge": 24,
        "sector": "technology",
    }

    resp = client.post("/session/profile", json={"state": {"savedLoans": ["in-mudra-shishu"]}, "profile": profile})

    assert resp.status_code == 200
    assert resp.json()["userProfile"]["creditScore"] == 750
    assert resp.json()["savedLoans"] == ["in-mudra-shishu"]
