from .account import Account
from .schemas import AccountResponse, AccountSave, InterestResponse

__all__ = [
    "Account",
    "AccountResponse",
    "AccountSave",
    "InterestResponse",
]
