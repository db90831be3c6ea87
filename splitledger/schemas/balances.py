from decimal import Decimal
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class Balance(BaseModel):
    id: str
    paid: Decimal
    share: Decimal
    balance: Decimal

    class Config:
        frozen = True

class NetBalance(BaseModel):
    id: str
    balance: Decimal

    class Config:
        frozen = True

class UserBalanceOut(BaseModel):
    user_id: str
    name: str
    email: str
    avatar: str
    paid: float
    share: float
    balance: float

    class Config:
        alias_generator = to_camel
        populate_by_name = True
