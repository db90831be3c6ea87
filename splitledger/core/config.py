from decimal import Decimal
from typing import Literal
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Splitledger"
    LOG_LEVEL: str = "INFO"

    # balances at or below this are treated as settled by the optimizer
    SETTLEMENT_EPSILON: Decimal = Decimal("0.01")
    BALANCE_DRIFT_TOLERANCE: Decimal = Decimal("1.0")

    UNKNOWN_PAYER_POLICY: Literal["reject", "skip"] = "reject"

    class Config:
        env_file = ".env"

settings = Settings()
