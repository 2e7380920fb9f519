from functools import lru_cache

from ..services import AccountStore


@lru_cache()
def get_account_store() -> AccountStore:
    return AccountStore()
