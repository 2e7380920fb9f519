import math

from fastapi import APIRouter, Depends, Query

from ..core.dependencies import get_account_store
from ..core.errors import AccountNotFoundError, InterestNotRepresentableError
from ..models import Account, AccountResponse, AccountSave, InterestResponse
from ..services import AccountStore, calculate_interest


router = APIRouter(prefix="/accounts", tags=["accounts"])

def _require_account(store: AccountStore, account_id: str) -> Account:
    account = store.get_account(account_id)
    if account is None:
        raise AccountNotFoundError(f"Account {account_id} not found")
    return account

def _to_response(account: Account) -> AccountResponse:
    return AccountResponse(id=account.id, balance=account.balance)

def _interest_response(balance: float, rate: float) -> InterestResponse:
    interest = calculate_interest(balance, rate)
    if not math.isfinite(interest):
        raise InterestNotRepresentableError(
            f"Interest for balance {balance!r} at rate {rate!r} is not a finite number"
        )
    return InterestResponse(balance=balance, rate=rate, interest=interest)

@router.put("/{account_id}", response_model=AccountResponse)
def save_account(
    account_id: str,
    payload: AccountSave,
    store: AccountStore = Depends(get_account_store),
) -> AccountResponse:
    account = Account(id=account_id, balance=payload.balance)
    store.save_account(account)
    return _to_response(account)

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    store: AccountStore = Depends(get_account_store),
) -> AccountResponse:
    return _to_response(_require_account(store, account_id))

@router.get("/{account_id}/interest", response_model=InterestResponse)
def get_account_interest(
    account_id: str,
    rate: float = Query(..., allow_inf_nan=False),
    store: AccountStore = Depends(get_account_store),
) -> InterestResponse:
    account = _require_account(store, account_id)
    return _interest_response(account.balance, rate)

interest_router = APIRouter(prefix="/interest", tags=["interest"])

@interest_router.get("", response_model=InterestResponse)
def get_interest(
    balance: float = Query(..., allow_inf_nan=False),
    rate: float = Query(..., allow_inf_nan=False),
) -> InterestResponse:
    return _interest_response(balance, rate)

__all__ = ["router", "interest_router"]
