# seeder.py - Siembra de items al arrancar el proceso
#
# Se ejecuta una sola vez desde main(), después de construir la persistencia.
# No es idempotente: cada ejecución inserta tres filas nuevas.
# Cualquier error de la persistencia o de la salida se propaga sin capturar.

import logging
import sys
from typing import List, Optional, TextIO

from inventory.models.item import ItemCreate
from inventory.repositories.items import ItemRepository

logger = logging.getLogger(__name__)

SEED_ITEMS = [
    ("Adam", 9.99, 5.0),
    ("Eve", 14.99, 3.0),
    ("John", 7.49, 10.0),
]


def build_seed_items() -> List[ItemCreate]:
    return [
        ItemCreate(name=name, price=price, quantity=quantity)
        for name, price, quantity in SEED_ITEMS
    ]


def seed_items(repository: ItemRepository, out: Optional[TextIO] = None) -> None:
    """
    Guarda los items semilla en un solo lote, lee todo el almacén
    y escribe una línea por item en `out` (stdout por defecto),
    en el orden que devuelve el repositorio.
    """
    if out is None:
        out = sys.stdout

    saved = repository.save_all(build_seed_items())
    logger.info("Seeded %d items", len(saved))

    items = repository.find_all()
    logger.info("Store now holds %d items", len(items))
    for item in items:
        print(item, file=out)
