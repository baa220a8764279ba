# ============================================
# catalog/admin.py — Admin Editing Flow
# ============================================
# States:
#
#     IDLE -> FORM_OPEN (create | edit) -> SUBMITTING -> IDLE
#                   ^                           |
#                   +---- validation / error ---+
#
#     IDLE -> DELETE_CONFIRMING -> IDLE
#
# A failed submit leaves the form open with its input intact; the failure is
# reported as an error notification. After every successful write the
# product list is reloaded from the API, never patched locally.

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

from .client import CatalogClient
from .errors import CatalogError
from .forms import ProductForm
from .notifications import Notifier, Severity

logger = logging.getLogger(__name__)


class AdminState(str, Enum):
    IDLE = "idle"
    FORM_OPEN = "form_open"
    SUBMITTING = "submitting"
    DELETE_CONFIRMING = "delete_confirming"


class InvalidTransition(Exception):
    """An admin action was attempted from a state that does not allow it."""


class AdminController:

    def __init__(self, client: CatalogClient):
        self.client = client
        self.state = AdminState.IDLE
        self.products: list = []
        self.loading = False
        self.error: Optional[str] = None
        self.form: Optional[ProductForm] = None
        self.product_to_delete: Optional[dict] = None
        self.notifier = Notifier()

    def _require(self, *states: AdminState) -> None:
        if self.state not in states:
            raise InvalidTransition(f"not allowed while {self.state.value}")

    async def refresh(self) -> None:
        self.loading = True
        try:
            self.products = await self.client.get_products()
            self.error = None
        except CatalogError as exc:
            logger.error("Error fetching products: %s", exc.message)
            self.error = "Failed to load products"
            self.notifier.show("Failed to load products", Severity.ERROR)
        finally:
            self.loading = False

    # ── Create / edit ────────────────────────────────────────
    def open_create(self) -> ProductForm:
        self._require(AdminState.IDLE, AdminState.FORM_OPEN)
        self.form = ProductForm.from_product(None)
        self.state = AdminState.FORM_OPEN
        return self.form

    def open_edit(self, product: dict) -> ProductForm:
        self._require(AdminState.IDLE, AdminState.FORM_OPEN)
        self.form = ProductForm.from_product(product)
        self.state = AdminState.FORM_OPEN
        return self.form

    def cancel_form(self) -> None:
        self._require(AdminState.FORM_OPEN)
        self.form = None
        self.state = AdminState.IDLE

    async def submit(self) -> bool:
        """Validate and send the open form. Returns True once saved."""
        self._require(AdminState.FORM_OPEN)
        form = self.form
        if not form.validate():
            return False

        payload = form.to_payload()
        self.state = AdminState.SUBMITTING
        try:
            if form.is_edit:
                await self.client.update_product(form.product_id, payload)
                self.notifier.show(f'Product "{payload["name"]}" updated successfully')
            else:
                await self.client.create_product(payload)
                self.notifier.show(f'Product "{payload["name"]}" added successfully')
        except CatalogError as exc:
            logger.error("Error saving product: %s", exc.message)
            self.notifier.show(f"Failed to save product: {exc.message}", Severity.ERROR)
            self.state = AdminState.FORM_OPEN
            return False

        self.form = None
        self.state = AdminState.IDLE
        await self.refresh()
        return True

    # ── Delete ───────────────────────────────────────────────
    def request_delete(self, product: dict) -> None:
        self._require(AdminState.IDLE)
        self.product_to_delete = product
        self.state = AdminState.DELETE_CONFIRMING

    def cancel_delete(self) -> None:
        self._require(AdminState.DELETE_CONFIRMING)
        self.product_to_delete = None
        self.state = AdminState.IDLE

    async def confirm_delete(self) -> bool:
        self._require(AdminState.DELETE_CONFIRMING)
        product: Any = self.product_to_delete
        product_id = product.get("id", product.get("_id"))
        try:
            await self.client.delete_product(str(product_id))
        except CatalogError as exc:
            logger.error("Error deleting product: %s", exc.message)
            self.notifier.show(f"Failed to delete product: {exc.message}", Severity.ERROR)
            return False

        self.notifier.show(f'Product "{product.get("name")}" deleted successfully')
        self.product_to_delete = None
        self.state = AdminState.IDLE
        await self.refresh()
        return True
