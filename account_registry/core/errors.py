class AccountNotFoundError(Exception):
    """Raised at the HTTP boundary when an account id is missing from the store."""

class InterestNotRepresentableError(Exception):
    """Raised at the HTTP boundary when balance * rate is not a finite number."""
