from splitledger.core.config import settings

async def system_health():
    return {
        "status": "ok",
        "service": settings.APP_NAME,
    }
