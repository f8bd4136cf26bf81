# dashboard/app.py

import logging
import sys
from pathlib import Path

from fastapi import FastAPI

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dashboard.config import settings
from dashboard.api import analyze

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
)

# Include API routers
app.include_router(analyze.router, prefix="/api", tags=["analyze"])


@app.get("/api/health")
async def health():
    """Liveness check"""
    return {"status": "ok", "app": settings.app_name}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "dashboard.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
