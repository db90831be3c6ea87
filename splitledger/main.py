import logging
from fastapi import FastAPI
from splitledger.core.config import settings
from splitledger.api.v1.routes.system import router as system_router
from splitledger.api.v1.routes.settlement import router as settlement_router

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME)

@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(settlement_router, prefix="/api/v1/settlements")
