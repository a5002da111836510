"""
Tests for the calendar expansion endpoint
"""


def test_expand_week(client, period_payload):
    """Test expanding a week without holidays"""
    response = client.post("/api/v1/calendar/expand", json=period_payload())
    assert response.status_code == 200

    data = response.json()
    assert data["total_days"] == 7
    assert data["payable_days"] == 6
    assert data["total_weight"] == "5.5"
    assert [day["weight"] for day in data["days"]] == ["1", "1", "1", "1", "1", "0.5", "0"]
    assert data["days"][0]["weekday_name"] == "Monday"
    assert data["days"][6]["is_sunday"] is True


def test_expand_with_holidays(client, period_payload):
    """Test worked and unworked holidays in the calendar"""
    holidays = [
        {"date": "2024-01-03", "name": "Store closed"},
        {"date": "2024-01-04", "name": "Local fair", "is_worked": True},
    ]
    response = client.post("/api/v1/calendar/expand", json=period_payload(holidays=holidays))
    assert response.status_code == 200

    days = response.json()["days"]
    assert days[2]["is_holiday"] is True
    assert days[2]["weight"] == "0"
    assert days[3]["holiday_worked"] is True
    assert days[3]["weight"] == "0.5"
    assert response.json()["total_weight"] == "4.0"


def test_expand_portuguese_locale(client, period_payload):
    """Test per-request weekday locale"""
    response = client.post("/api/v1/calendar/expand", json=period_payload(locale="pt_BR"))
    assert response.status_code == 200

    saturday = response.json()["days"][5]
    assert saturday["weekday_name"] == "Sábado"
    assert saturday["weekday_short_name"] == "Sáb"


def test_expand_default_locale_from_settings(client, override_settings, period_payload):
    """Test WEEKDAY_LOCALE applies when the request has no locale"""
    override_settings(WEEKDAY_LOCALE="pt_BR")

    response = client.post("/api/v1/calendar/expand", json=period_payload())
    assert response.status_code == 200
    assert response.json()["days"][0]["weekday_short_name"] == "Seg"


def test_expand_reversed_range(client, period_payload):
    """Test that start after end is a 400 with the error envelope"""
    response = client.post(
        "/api/v1/calendar/expand", json=period_payload(start="2024-01-10", end="2024-01-01")
    )
    assert response.status_code == 400

    data = response.json()
    assert data["error"] is True
    assert data["error_type"] == "InvalidRangeError"
    assert data["path"] == "/api/v1/calendar/expand"


def test_expand_duplicate_holiday(client, period_payload):
    """Test that two holidays on one date are rejected"""
    holidays = [
        {"date": "2024-01-03", "name": "A"},
        {"date": "2024-01-03", "name": "B", "is_worked": True},
    ]
    response = client.post("/api/v1/calendar/expand", json=period_payload(holidays=holidays))
    assert response.status_code == 422
    assert response.json()["error"] is True


def test_expand_unknown_locale(client, period_payload):
    """Test that unsupported locales are a validation error"""
    response = client.post("/api/v1/calendar/expand", json=period_payload(locale="fr"))
    assert response.status_code == 422


def test_expand_invalid_date(client, period_payload):
    """Test that malformed dates are a validation error"""
    response = client.post("/api/v1/calendar/expand", json=period_payload(start="2024-13-01"))
    assert response.status_code == 422
