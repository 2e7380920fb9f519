from pydantic import BaseModel, Field


class AccountSave(BaseModel):
    balance: float = Field(
        ...,
        allow_inf_nan=False,
        description="Signed balance; negative values are accepted",
    )

class AccountResponse(BaseModel):
    id: str
    balance: float

class InterestResponse(BaseModel):
    balance: float
    rate: float = Field(..., description="Rate as a decimal (0.05 = 5%)")
    interest: float
