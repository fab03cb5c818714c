# backend/quickverify/main.py
import logging

from fastapi import FastAPI

from .config import settings
from .routers import verify

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(message)s",
)

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

# ---------------------------------------------------
# Health check
# ---------------------------------------------------
@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}

# ---------------------------------------------------
# Routers
# ---------------------------------------------------
app.include_router(verify.router, prefix="/api", tags=["verify"])

# ---------------------------------------------------
# Note:
# Run with `uvicorn quickverify.main:app`; no uvicorn.run() here.
# ---------------------------------------------------
