"""
Bill endpoint tests.
"""

import pytest
from dependency_injector import providers

from textile_billing.deps.di_container import get_container
from conftest import TODAY

AS_OF = {"as_of": TODAY.isoformat()}


async def create_bill(client, payload):
    response = await client.post("/api/v1/bills", json=payload, params=AS_OF)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_bill_computes_amounts_and_aging(test_client, bill_payload):
    bill = await create_bill(test_client, bill_payload())
    
    assert bill["base_amount"] == 10000
    assert bill["tax_amount"] == 1000
    assert bill["total_amount"] == 11000
    assert bill["due_date"] == "2025-08-15"
    assert bill["days_to_due"] == -5
    assert bill["status"] == "overdue"
    assert bill["payment_received"] is False
    assert bill["buyer_name"] == "Shrusti pvt ltd"
    assert bill["material_hsn_code"] == "5007"
    assert bill["dhara_name"] == "War to War (10 days)"


@pytest.mark.asyncio
async def test_missing_reference_is_a_validation_error(test_client, bill_payload):
    response = await test_client.post("/api/v1/bills", json=bill_payload(dalal_id=999))
    
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["details"] == {"reference": "dalal", "id": 999}
    
    listing = await test_client.get("/api/v1/bills")
    assert listing.json()["total"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"meter": 0},
        {"price_rate": -5},
        {"taka_count": 0},
        {"chalan_no": ""},
        {"meter": "abc"},
    ],
)
async def test_invalid_inputs_are_rejected(test_client, bill_payload, overrides):
    response = await test_client.post("/api/v1/bills", json=bill_payload(**overrides))
    
    assert response.status_code == 422
    assert response.json()["error"]["message"] == "Validation error"


@pytest.mark.asyncio
async def test_days_to_due_follows_as_of(test_client, bill_payload):
    bill = await create_bill(test_client, bill_payload())
    
    response = await test_client.get(f"/api/v1/bills/{bill['id']}", params={"as_of": "2025-08-10"})
    
    assert response.status_code == 200
    assert response.json()["days_to_due"] == 5
    assert response.json()["status"] == "due-soon"


@pytest.mark.asyncio
async def test_days_to_due_uses_container_clock(test_client, bill_payload):
    bill = await create_bill(test_client, bill_payload())
    container = get_container()
    
    with container.today.override(providers.Object(TODAY.replace(day=9))):
        response = await test_client.get(f"/api/v1/bills/{bill['id']}")
    
    assert response.json()["days_to_due"] == 6
    assert response.json()["status"] == "pending"


@pytest.mark.asyncio
async def test_update_recomputes_amounts(test_client, bill_payload):
    bill = await create_bill(test_client, bill_payload())
    
    response = await test_client.put(
        f"/api/v1/bills/{bill['id']}",
        json=bill_payload(meter=10, price_rate=150, bill_no=2),
        params=AS_OF,
    )
    
    assert response.status_code == 200
    updated = response.json()
    assert updated["bill_no"] == 2
    assert updated["base_amount"] == 1500
    assert updated["tax_amount"] == 150
    assert updated["total_amount"] == 1650


@pytest.mark.asyncio
async def test_tax_rate_change_does_not_touch_existing_bills(test_client, bill_payload, references):
    bill = await create_bill(test_client, bill_payload())
    
    response = await test_client.put(
        f"/api/v1/taxes/{references['tax']['id']}",
        json={"percentage": 18},
    )
    assert response.status_code == 200
    
    refreshed = (await test_client.get(f"/api/v1/bills/{bill['id']}")).json()
    assert refreshed["tax_amount"] == 1000
    assert refreshed["total_amount"] == 11000
    assert refreshed["tax_percentage"] == 10
    
    invoice = (await test_client.get(f"/api/v1/bills/{bill['id']}/invoice")).json()
    assert invoice["bill"]["tax_name"] == "GST"
    assert invoice["bill"]["tax_percentage"] == 10
    assert invoice["amounts"]["tax_amount"] == invoice["amounts"]["base_amount"] * 10 / 100


@pytest.mark.asyncio
async def test_mark_paid_is_one_way(test_client, bill_payload):
    bill = await create_bill(test_client, bill_payload())
    
    response = await test_client.post(f"/api/v1/bills/{bill['id']}/mark-paid", params=AS_OF)
    assert response.status_code == 200
    assert response.json()["payment_received"] is True
    assert response.json()["status"] == "paid"
    
    again = await test_client.post(f"/api/v1/bills/{bill['id']}/mark-paid")
    assert again.status_code == 409


@pytest.mark.asyncio
async def test_update_keeps_payment_state(test_client, bill_payload):
    bill = await create_bill(test_client, bill_payload())
    await test_client.post(f"/api/v1/bills/{bill['id']}/mark-paid")
    
    response = await test_client.put(f"/api/v1/bills/{bill['id']}", json=bill_payload(meter=60))
    
    assert response.json()["payment_received"] is True


@pytest.mark.asyncio
async def test_list_filters_and_order(test_client, bill_payload, references):
    other = await test_client.post("/api/v1/buyers", json={"name": "Jalaram ltd.", "contact_number": "8574968596"})
    other_id = other.json()["id"]
    
    first = await create_bill(test_client, bill_payload(date="2025-07-01"))
    second = await create_bill(test_client, bill_payload(date="2025-08-05", buyer_id=other_id))
    third = await create_bill(test_client, bill_payload(date="2025-08-10"))
    await test_client.post(f"/api/v1/bills/{first['id']}/mark-paid")
    
    everything = (await test_client.get("/api/v1/bills", params=AS_OF)).json()
    assert [bill["id"] for bill in everything["items"]] == [third["id"], second["id"], first["id"]]
    assert everything["total"] == 3
    
    pending = (await test_client.get("/api/v1/bills", params={"status": "pending"})).json()
    assert [bill["id"] for bill in pending["items"]] == [third["id"], second["id"]]
    
    paid = (await test_client.get("/api/v1/bills", params={"status": "paid"})).json()
    assert [bill["id"] for bill in paid["items"]] == [first["id"]]
    
    by_buyer = (await test_client.get("/api/v1/bills", params={"buyer_id": other_id})).json()
    assert [bill["id"] for bill in by_buyer["items"]] == [second["id"]]
    
    ranged = (await test_client.get(
        "/api/v1/bills",
        params={"from_date": "2025-07-01", "to_date": "2025-08-05"},
    )).json()
    assert [bill["id"] for bill in ranged["items"]] == [second["id"], first["id"]]


@pytest.mark.asyncio
async def test_list_rejects_bad_filters(test_client):
    bad_status = await test_client.get("/api/v1/bills", params={"status": "overdue"})
    assert bad_status.status_code == 422
    
    inverted = await test_client.get(
        "/api/v1/bills",
        params={"from_date": "2025-09-01", "to_date": "2025-08-01"},
    )
    assert inverted.status_code == 422


@pytest.mark.asyncio
async def test_urgent_bills(test_client, bill_payload):
    overdue = await create_bill(test_client, bill_payload(date="2025-01-05"))
    due_soon = await create_bill(test_client, bill_payload(date="2025-08-13"))
    await create_bill(test_client, bill_payload(date="2025-08-19"))  # due 2025-08-29, 9 days out
    paid = await create_bill(test_client, bill_payload(date="2025-08-01"))
    await test_client.post(f"/api/v1/bills/{paid['id']}/mark-paid")
    
    response = await test_client.get("/api/v1/bills/urgent", params=AS_OF)
    
    assert response.status_code == 200
    urgent = response.json()
    assert [bill["id"] for bill in urgent] == [overdue["id"], due_soon["id"]]
    assert urgent[0]["days_to_due"] == -217
    assert urgent[1]["days_to_due"] == 3


@pytest.mark.asyncio
async def test_invoice(test_client, bill_payload):
    # 750.375 m at 200 with 10% tax
    bill = await create_bill(test_client, bill_payload(meter=750.375))
    
    response = await test_client.get(f"/api/v1/bills/{bill['id']}/invoice")
    
    assert response.status_code == 200
    invoice = response.json()
    assert invoice["bill"]["id"] == bill["id"]
    assert invoice["company"] is None
    assert invoice["amounts"]["total_amount"] == 165082.5
    assert invoice["amount_in_words"] == (
        "One Lakh Sixty Five Thousand Eighty Two Rupees and Fifty Paise Only"
    )


@pytest.mark.asyncio
async def test_delete_bill(test_client, bill_payload):
    bill = await create_bill(test_client, bill_payload())
    
    response = await test_client.delete(f"/api/v1/bills/{bill['id']}")
    assert response.status_code == 204
    
    missing = await test_client.get(f"/api/v1/bills/{bill['id']}")
    assert missing.status_code == 404
    assert (await test_client.delete(f"/api/v1/bills/{bill['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_unknown_bill_is_404(test_client):
    assert (await test_client.get("/api/v1/bills/404")).status_code == 404
    assert (await test_client.post("/api/v1/bills/404/mark-paid")).status_code == 404
    assert (await test_client.get("/api/v1/bills/404/invoice")).status_code == 404


@pytest.mark.asyncio
async def test_payment_term_days_are_capped(test_client):
    response = await test_client.post("/api/v1/dharas", json={"dhara_name": "Forever", "days": 3_000_000})
    
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_bill_with_unrepresentable_due_date_is_not_saved(test_client, bill_payload, references):
    await create_bill(test_client, bill_payload())
    dhara = (await test_client.post("/api/v1/dharas", json={"dhara_name": "Ten years", "days": 3650})).json()
    
    response = await test_client.post(
        "/api/v1/bills",
        json=bill_payload(bill_no=2, date="9999-06-01", dhara_id=dhara["id"]),
    )
    
    assert response.status_code == 422
    assert response.json()["error"]["details"] == {"date": "9999-06-01", "days": 3650}
    
    listed = await test_client.get("/api/v1/bills", params=AS_OF)
    assert listed.status_code == 200
    assert listed.json()["total"] == 1
    assert (await test_client.get("/api/v1/bills/urgent", params=AS_OF)).status_code == 200
    assert (await test_client.get("/api/v1/dashboard", params=AS_OF)).status_code == 200


@pytest.mark.asyncio
async def test_payment_term_change_cannot_push_due_dates_past_calendar_end(test_client, bill_payload, references):
    await create_bill(test_client, bill_payload(date="9995-01-01"))
    
    response = await test_client.put(f"/api/v1/dharas/{references['dhara']['id']}", json={"days": 3650})
    
    assert response.status_code == 422
    dhara = (await test_client.get(f"/api/v1/dharas/{references['dhara']['id']}")).json()
    assert dhara["days"] == 10
    assert (await test_client.get("/api/v1/bills", params=AS_OF)).status_code == 200
