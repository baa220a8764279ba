import pytest
from click.testing import CliRunner

from catalog import seeder
from catalog.errors import StorageError
from catalog.seed_data import SEED_PRODUCTS
from tests.fakes import FakeProductStore, product_payload


class TestSeeding:

    @pytest.mark.asyncio
    async def test_import_replaces_existing_products(self):
        store = FakeProductStore()
        await seeder.import_data(store, [product_payload(name="Old")])

        count = await seeder.import_data(store)

        assert count == len(SEED_PRODUCTS)
        names = {p.name for p in await store.find_all()}
        assert names == {p["name"] for p in SEED_PRODUCTS}

    @pytest.mark.asyncio
    async def test_destroy_clears(self):
        store = FakeProductStore()
        await seeder.import_data(store)
        assert await seeder.destroy_data(store) == len(SEED_PRODUCTS)
        assert len(store) == 0


def test_cli_exits_non_zero_when_database_unreachable(monkeypatch):
    async def refuse(settings, destroy):
        raise StorageError("Could not connect to MongoDB", detail="connection refused")

    monkeypatch.setattr(seeder, "_run", refuse)
    result = CliRunner().invoke(seeder.main, ["-d"])

    assert result.exit_code == 1
    assert "Could not connect to MongoDB" in result.output
