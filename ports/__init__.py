from .repos import CompaniesStorePort, StoreError

__all__ = [
    "CompaniesStorePort",
    "StoreError",
]
