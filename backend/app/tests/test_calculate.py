"""
Tests for the stateless settlement calculation endpoint.
"""
from decimal import Decimal


def calculate(client, pairs):
    return client.post(
        "/api/settlements/calculate",
        json=[{"name": name, "amount_paid": amount} for name, amount in pairs]
    )


def test_calculate_three_way(client):
    """Test largest debtor pays first, with from/to field names."""
    response = calculate(client, [("Alice", 90), ("Bob", 0), ("Carol", 30)])
    assert response.status_code == 200

    data = response.json()
    assert Decimal(data["fair_share"]) == 40
    assert data["participant_count"] == 3
    assert [(t["from"], t["to"], Decimal(t["amount"])) for t in data["transfers"]] == [
        ("Bob", "Alice", Decimal("40")),
        ("Carol", "Alice", Decimal("10")),
    ]


def test_calculate_empty_list(client):
    """Test an empty contributor list settles to nothing."""
    response = calculate(client, [])
    assert response.status_code == 200
    assert response.json()["transfers"] == []
    assert response.json()["participant_count"] == 0


def test_calculate_rejects_duplicate_names(client):
    """Test names differing only by case are rejected."""
    response = calculate(client, [("A", 10), ("a", 0)])
    assert response.status_code == 400
    assert response.json()["detail"] == "A person with this name already exists"


def test_calculate_rejects_negative_amount(client):
    """Test negative amounts are rejected."""
    response = calculate(client, [("Alice", 10), ("Bob", -5)])
    assert response.status_code == 400
    assert response.json()["detail"] == "Amount cannot be negative"


def test_calculate_rejects_non_numeric_amount(client):
    """Test non-numeric amounts are rejected by validation."""
    response = calculate(client, [("Alice", 10), ("Bob", "ten")])
    assert response.status_code == 400
    assert response.json()["detail"] == "Amount must be a number"


def test_calculate_keeps_sub_cent_amounts(client):
    """Test amounts are settled as sent, not rounded to cents first."""
    response = calculate(client, [("A", "10.005"), ("B", "10.00"), ("C", "9.985")])
    assert response.status_code == 200

    data = response.json()
    assert Decimal(data["total_paid"]) == Decimal("29.99")
    assert data["transfers"] == []
