import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator

class TransactionType(str, Enum):
    EXPENSE = "EXPENSE"
    INCOME = "INCOME"

class Transaction(BaseModel):
    amount: Decimal = Field(gt=0)
    type: TransactionType = TransactionType.EXPENSE
    # only meaningful for EXPENSE
    paid_by: Optional[str] = Field(None, alias="paidBy")
    title: str = ""
    date: Optional[datetime.date] = None

    class Config:
        frozen = True
        populate_by_name = True

    @model_validator(mode="after")
    def require_payer_for_expense(self):
        if self.type == TransactionType.EXPENSE and not self.paid_by:
            raise ValueError("paidBy is required for EXPENSE transactions")
        return self
