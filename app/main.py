import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# ✅ Import All API Routes
from app.api.routes import jobs, webhooks, affiliates, system
from app.core import config
from app.core.logging_config import setup_logging, sanitize_log_data
from app.db.init_db import init_db

logger = logging.getLogger(__name__)


# ============================================
# ✅ STARTUP: LOGGING + CREATE-IF-ABSENT TABLES
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    settings = sanitize_log_data({
        "database_url": config.DATABASE_URL,
        "stripe_webhook_secret": config.STRIPE_WEBHOOK_SECRET,
        "log_level": config.LOG_LEVEL,
        "cors_origins": config.CORS_ORIGINS,
    })
    logger.info(f"Starting Job Board API with config: {settings}")
    init_db()
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Job Board API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Authorization", "Content-Type", "Stripe-Signature"],
)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(jobs.router)
app.include_router(webhooks.router)
app.include_router(affiliates.router)
app.include_router(system.router)


# ============================================
# ✅ HEALTH CHECK ROOT ENDPOINT
# ============================================

@app.get("/")
def root():
    return {"status": "Job Board API running"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=config.PORT)
