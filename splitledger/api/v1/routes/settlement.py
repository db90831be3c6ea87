from fastapi import APIRouter, HTTPException
from splitledger.core.errors import LedgerError
from splitledger.schemas.settlements import (
    SettlementReport,
    SettlementRequest,
    SimplifyOut,
    SimplifyRequest,
    TransferOut,
)
from splitledger.services.settlement_service import build_settlement_report, settle

router = APIRouter()


@router.post("/calculate", response_model=SettlementReport)
async def calculate_settlements(data: SettlementRequest):
    try:
        return build_settlement_report(
            data.members,
            data.transactions,
            month=data.month,
            year=data.year,
        )
    except LedgerError as e:
        raise HTTPException(400, str(e))


@router.post("/simplify", response_model=SimplifyOut)
async def simplify_balances(data: SimplifyRequest):
    try:
        settlements = settle(data.balances)
    except LedgerError as e:
        raise HTTPException(400, str(e))

    return SimplifyOut(settlements=[
        TransferOut(from_id=s.from_id, to_id=s.to_id, amount=float(s.amount))
        for s in settlements
    ])
