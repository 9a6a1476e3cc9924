# backend/inventory/repositories/items.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from inventory.core.settings import Settings
from inventory.models.item import Item, ItemCreate
from inventory.utils.errors import RepositoryError

logger = logging.getLogger(__name__)


class ItemRepository(ABC):
    """Colaborador de persistencia: guardar en lote y leer todo."""

    @abstractmethod
    def save_all(self, items: Iterable[ItemCreate]) -> List[Item]:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> List[Item]:
        raise NotImplementedError


class InMemoryItemRepository(ItemRepository):
    """Almacén local del proceso; ids secuenciales "1", "2", ..."""

    def __init__(self) -> None:
        self._rows: List[Item] = []
        self._next_id = 1

    def save_all(self, items: Iterable[ItemCreate]) -> List[Item]:
        saved: List[Item] = []
        for item in items:
            row = Item(id=str(self._next_id), **item.model_dump())
            self._next_id += 1
            saved.append(row)
        self._rows.extend(saved)
        return saved

    def find_all(self) -> List[Item]:
        return list(self._rows)


# ---------- Supabase ----------
def _row_to_item(r: Dict[str, Any]) -> Item:
    # Sin valores por defecto: una fila incompleta debe fallar, no inventarse
    if r.get("id") is None:
        raise RepositoryError(f"row without id: {r!r}")
    return Item(
        id=str(r["id"]),
        name=r.get("name"),
        price=r.get("price"),
        quantity=r.get("quantity"),
    )


def _raise_on_error(res: Any, action: str) -> None:
    if getattr(res, "error", None):
        detail = getattr(res.error, "message", str(res.error))
        raise RepositoryError(f"{action}: {detail}")


class SupabaseItemRepository(ItemRepository):
    def __init__(self, client: Any, table: str = "items") -> None:
        self.client = client
        self.table = table

    def save_all(self, items: Iterable[ItemCreate]) -> List[Item]:
        data = [item.model_dump() for item in items]
        if not data:
            return []
        res = self.client.table(self.table).insert(data).execute()
        _raise_on_error(res, f"insert into {self.table}")
        rows = getattr(res, "data", None) or []
        return [_row_to_item(r) for r in rows]

    def find_all(self) -> List[Item]:
        res = self.client.table(self.table).select("*").order("id", desc=False).execute()
        _raise_on_error(res, f"select from {self.table}")
        rows = getattr(res, "data", None) or []
        return [_row_to_item(r) for r in rows]


def build_repository(settings: Settings) -> ItemRepository:
    backend = settings.STORAGE_BACKEND
    if backend == "memory":
        logger.info("Using in-memory item store")
        return InMemoryItemRepository()

    if backend == "supabase":
        if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
            raise RepositoryError("SUPABASE_URL and SUPABASE_KEY are required for the supabase backend")
        from inventory.db.supabase import get_supabase_client

        client = get_supabase_client(str(settings.SUPABASE_URL), settings.SUPABASE_KEY)
        logger.info("Using Supabase table %r", settings.ITEMS_TABLE)
        return SupabaseItemRepository(client, table=settings.ITEMS_TABLE)

    raise RepositoryError(f"Unknown STORAGE_BACKEND: {backend!r}")
