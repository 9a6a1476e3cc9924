# scripts/seed.py
# Propósito: sembrar los items de ejemplo e imprimirlos, sin levantar el servidor.

import logging

from inventory.core.settings import settings
from inventory.repositories.items import build_repository
from inventory.services.seeder import seed_items
from inventory.utils.logging import setup_logging

logger = logging.getLogger("seed")


def main():
    # Configuración (STORAGE_BACKEND, SUPABASE_URL, SUPABASE_KEY) vía inventory.core.settings
    # Sin upsert: cada ejecución añade tres filas nuevas
    setup_logging(settings.LOG_LEVEL)
    try:
        repository = build_repository(settings)
        seed_items(repository)
    except Exception as e:
        logger.error("❌ Error en seed: %s", e)
        raise SystemExit(1) from e

    logger.info("✅ Seed completado con éxito.")


if __name__ == "__main__":
    main()
