# supabase.py - Inicialización del cliente Supabase
# El cliente se crea bajo demanda: con STORAGE_BACKEND=memory no hace falta URL ni KEY

from functools import lru_cache

from supabase import create_client, Client


@lru_cache(maxsize=None)
def get_supabase_client(url: str, key: str) -> Client:
    # supabase-py espera str, no AnyHttpUrl
    return create_client(str(url), key)
