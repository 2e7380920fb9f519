from .accounts import AccountStore
from .interest import calculate_interest

__all__ = ["AccountStore", "calculate_interest"]
