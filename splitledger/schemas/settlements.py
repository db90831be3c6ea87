from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from splitledger.schemas.balances import NetBalance, UserBalanceOut
from splitledger.schemas.member import Member, MemberRef
from splitledger.schemas.transaction import Transaction

class Settlement(BaseModel):
    from_id: str
    to_id: str
    amount: Decimal

    class Config:
        frozen = True

class SettlementOut(BaseModel):
    from_: MemberRef = Field(alias="from")
    to: MemberRef
    amount: float

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class SettlementReport(BaseModel):
    user_balances: List[UserBalanceOut]
    settlements: List[SettlementOut]
    is_settled: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class SettlementRequest(BaseModel):
    members: List[Member]
    transactions: List[Transaction] = []
    month: Optional[int] = None
    year: Optional[int] = None

class SimplifyRequest(BaseModel):
    balances: List[NetBalance]

class TransferOut(BaseModel):
    from_id: str
    to_id: str
    amount: float

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class SimplifyOut(BaseModel):
    settlements: List[TransferOut]
