"""
Seed data tests.
"""

import pytest

from textile_billing.db.init_db import DEFAULT_DHARAS, DEFAULT_MATERIALS, seed_initial_data
from textile_billing.db.repositories.dhara_repository import DharaRepository
from textile_billing.db.repositories.material_repository import MaterialRepository


@pytest.mark.asyncio
async def test_seed_defaults(test_db_session):
    await seed_initial_data(test_db_session)
    
    dharas = await DharaRepository(test_db_session).list()
    assert [dhara.days for dhara in dharas] == [0, 10, 35, 60]
    assert await MaterialRepository(test_db_session).count() == len(DEFAULT_MATERIALS)
    
    cash = await DharaRepository(test_db_session).get_by_name("Cash (0 days)")
    assert cash.days == 0


@pytest.mark.asyncio
async def test_seed_is_idempotent(test_db_session):
    await seed_initial_data(test_db_session)
    await seed_initial_data(test_db_session)
    
    assert await DharaRepository(test_db_session).count() == len(DEFAULT_DHARAS)
