"""File-backed shopping cart, one JSON document per session."""

import os
import json
import logging

from pydantic import ValidationError

from shared.file_store import FileStore
from shared.models import Product

logger = logging.getLogger("checkoutrail.cart")


class CartService:

    def __init__(self, session_id: str, data_dir: str | None = None):
        data_dir = data_dir or os.environ.get("DATA_DIR", "/app/data")
        self.session_id = session_id
        self.cart_path = os.path.join(data_dir, "carts", f"{session_id}.json")

    def _read_items(self) -> list[dict]:
        try:
            items = FileStore.read_json(self.cart_path, default=[])
        except json.JSONDecodeError:
            logger.warning(f"Corrupt cart for session {self.session_id}, treating as empty")
            return []
        return items if isinstance(items, list) else []

    def add_to_cart(self, product: Product) -> bool:
        items = self._read_items()
        if any(item.get("id") == product.id for item in items):
            return False
        items.append(product.model_dump())
        FileStore.write_json(self.cart_path, items)
        logger.info(f"Added product {product.id} to cart {self.session_id}")
        return True

    def get_cart(self) -> list[Product]:
        products = []
        for item in self._read_items():
            try:
                products.append(Product(**item))
            except (TypeError, ValidationError):
                logger.warning(f"Skipping malformed cart item in {self.session_id}: {item}")
        return products

    def get_total(self) -> float:
        return sum(product.price for product in self.get_cart())

    def clear_cart(self) -> None:
        FileStore.delete(self.cart_path)
        logger.info(f"Cleared cart {self.session_id}")
