from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from config.settings import Settings, get_settings
from ports.repos import CompaniesStorePort


StoreFactory = Callable[[Settings], CompaniesStorePort]

_REGISTRY: Dict[str, StoreFactory] = {}


def register(name: str, factory: StoreFactory) -> None:
    _REGISTRY[name] = factory


def get_store(name: str, settings: Optional[Settings] = None) -> CompaniesStorePort:
    if name not in _REGISTRY:
        raise KeyError(f"Unknown store backend: {name}")
    return _REGISTRY[name](settings or get_settings())


def available_stores() -> Dict[str, Any]:
    return dict(_REGISTRY)


def _sqlite_store(settings: Settings) -> CompaniesStorePort:
    from db.connection import open_tracker_db
    from db.repos.companies_repo import SqliteCompaniesStore

    conn = open_tracker_db(settings.db_path, settings.store_table)
    return SqliteCompaniesStore(conn, settings.store_table)


def _rest_store(settings: Settings) -> CompaniesStorePort:
    from services.rest_store import RestCompaniesStore

    return RestCompaniesStore(settings)


register("sqlite", _sqlite_store)
register("rest", _rest_store)
