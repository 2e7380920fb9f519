from __future__ import annotations

import logging
from typing import Dict, Optional

from ..models import Account


logger = logging.getLogger(__name__)


class AccountStore:
    """In-memory registry of accounts keyed by id."""

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    def get_account(self, account_id: str) -> Optional[Account]:
        account = self._accounts.get(account_id)
        if account is None:
            logger.debug("account.lookup.miss", extra={"account_id": account_id})
        return account

    def save_account(self, account: Account) -> None:
        # Last write wins; no merge with the previous record
        replaced = account.id in self._accounts
        self._accounts[account.id] = account
        logger.info(
            "account.saved",
            extra={
                "account_id": account.id,
                "balance": account.balance,
                "replaced": replaced,
            },
        )
