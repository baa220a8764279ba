# ============================================
# catalog/seeder.py — Offline Seeding Utility
# ============================================
# Replaces the product collection with the seed list.
# Run out-of-band, never by the service itself:
#
#     catalog-seed        # clear, then import SEED_PRODUCTS
#     catalog-seed -d     # clear only

from __future__ import annotations

import asyncio
import logging

import click

from .config import Settings, get_settings
from .database import Database
from .errors import CatalogError
from .models import ProductFields
from .seed_data import SEED_PRODUCTS
from .store import ProductStore

logger = logging.getLogger(__name__)


async def import_data(store: ProductStore, seed: list[dict] = SEED_PRODUCTS) -> int:
    await store.delete_all()
    click.echo("Deleted all existing products")
    products = await store.insert_many([ProductFields.model_validate(item) for item in seed])
    click.echo("Sample products imported successfully")
    return len(products)


async def destroy_data(store: ProductStore) -> int:
    deleted = await store.delete_all()
    click.echo("All products deleted")
    return deleted


async def _run(settings: Settings, destroy: bool) -> None:
    database = Database(settings)
    await database.connect()
    click.echo("MongoDB connected for seeding...")
    try:
        store = database.product_store()
        if destroy:
            await destroy_data(store)
        else:
            await import_data(store)
    finally:
        await database.close()


@click.command()
@click.option("-d", "--destroy", is_flag=True, help="Delete all products without importing.")
def main(destroy: bool) -> None:
    """Seed the product catalog."""
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    try:
        asyncio.run(_run(settings, destroy))
    except CatalogError as exc:
        detail = f": {exc.detail}" if exc.detail else ""
        raise click.ClickException(f"{exc.message}{detail}")


if __name__ == "__main__":
    main()
