"""Durable storage for the storefront cart.

The JSON file backend plays the part of the browser's local storage: the
whole cart is one document, rewritten on every change.
"""

import os
import tempfile
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from storefront.models import CartItem
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_ITEMS = TypeAdapter(list[CartItem])


class CartStorageError(Exception):
    """The stored cart could not be read or written."""


class CartStorage(Protocol):
    def load(self) -> list[CartItem]: ...

    def save(self, items: list[CartItem]) -> None: ...

    def clear(self) -> None: ...


class InMemoryCartStorage:
    """Keeps a serialized snapshot, so loaded items never alias saved ones."""

    def __init__(self):
        self._document: bytes | None = None

    def load(self) -> list[CartItem]:
        if self._document is None:
            return []
        return _ITEMS.validate_json(self._document)

    def save(self, items: list[CartItem]) -> None:
        self._document = _ITEMS.dump_json(items, by_alias=True)

    def clear(self) -> None:
        self._document = None


class JsonFileCartStorage:
    def __init__(self, path):
        self.path = Path(path).expanduser()

    def load(self) -> list[CartItem]:
        try:
            document = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise CartStorageError(f"Cannot read cart from {self.path}: {exc}") from exc

        try:
            return _ITEMS.validate_json(document)
        except ValidationError as exc:
            raise CartStorageError(f"Cart file {self.path} is corrupt: {exc}") from exc

    def save(self, items: list[CartItem]) -> None:
        document = _ITEMS.dump_json(items, by_alias=True, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write beside the target and swap in, so readers never see a partial file.
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as tmp:
                    tmp.write(document)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise CartStorageError(f"Cannot write cart to {self.path}: {exc}") from exc

        logger.debug("cart_saved", path=str(self.path), lines=len(items))

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise CartStorageError(f"Cannot remove cart file {self.path}: {exc}") from exc
