"""
Company profile endpoint tests.
"""

import pytest

PROFILE = {
    "name": "Vimal Textiles",
    "tagline": "Shree Ganeshay Namah",
    "address": "127-128, Prabhudarshan Ind., Ved Road, Surat-395004",
    "contact": "Mo. 95109 88597",
    "gst": "24AKPPM0065J1Z1",
    "pan": "AKPPM0065J",
    "business_type": "MFG & Dealers in Art Silk Cloth",
    "bank_name": "The Sutex Co-operative Bank Ltd.",
    "account_no": "002010021001351",
    "ifsc": "SUTB0248020",
    "branch": "Jahangirpura",
}


@pytest.mark.asyncio
async def test_profile_missing_until_saved(test_client):
    response = await test_client.get("/api/v1/company-profile")
    
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_save_replaces_single_profile(test_client):
    first = await test_client.put("/api/v1/company-profile", json=PROFILE)
    assert first.status_code == 200
    
    second = await test_client.put("/api/v1/company-profile", json={**PROFILE, "branch": "Ring Road"})
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]
    
    fetched = (await test_client.get("/api/v1/company-profile")).json()
    assert fetched["branch"] == "Ring Road"


@pytest.mark.asyncio
async def test_invoice_includes_profile(test_client, bill_payload):
    await test_client.put("/api/v1/company-profile", json=PROFILE)
    bill = (await test_client.post("/api/v1/bills", json=bill_payload())).json()
    
    invoice = (await test_client.get(f"/api/v1/bills/{bill['id']}/invoice")).json()
    
    assert invoice["company"]["name"] == "Vimal Textiles"
    assert invoice["amount_in_words"] == "Eleven Thousand Rupees Only"
