from fastapi import APIRouter
from splitledger.services.system_services import system_health

router = APIRouter()

@router.get("/health")
async def health():
    return await system_health()
