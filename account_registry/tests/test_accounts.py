import logging

from ..models import Account
from ..services import AccountStore


def test_fresh_store_returns_none() -> None:
    store = AccountStore()
    assert store.get_account("any-id") is None
    assert len(store) == 0

def test_save_then_get_returns_same_account() -> None:
    store = AccountStore()
    account = Account(id="a", balance=100)
    store.save_account(account)

    fetched = store.get_account("a")
    assert fetched == Account(id="a", balance=100)
    assert fetched is account

def test_save_with_existing_id_replaces_record() -> None:
    store = AccountStore()
    store.save_account(Account(id="a", balance=100))
    store.save_account(Account(id="a", balance=-25.5))

    assert store.get_account("a").balance == -25.5
    assert len(store) == 1

def test_distinct_ids_are_independent() -> None:
    store = AccountStore()
    store.save_account(Account(id="a", balance=100))
    store.save_account(Account(id="b", balance=200))

    assert store.get_account("a").balance == 100
    assert store.get_account("b").balance == 200
    assert "a" in store and "b" in store

def test_empty_id_is_a_legal_key() -> None:
    store = AccountStore()
    assert store.get_account("") is None

    store.save_account(Account(id="", balance=0))
    assert store.get_account("") == Account(id="", balance=0)

def test_stores_do_not_share_state() -> None:
    first = AccountStore()
    second = AccountStore()
    first.save_account(Account(id="a", balance=1))

    assert second.get_account("a") is None

def test_save_logs_replacement(caplog) -> None:
    store = AccountStore()
    with caplog.at_level(logging.INFO, logger="account_registry.services.accounts"):
        store.save_account(Account(id="a", balance=1))
        store.save_account(Account(id="a", balance=2))

    saved = [r for r in caplog.records if r.getMessage() == "account.saved"]
    assert [r.replaced for r in saved] == [False, True]
