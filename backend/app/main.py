"""SmartUstaz — FastAPI Application Entry Point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import settings
from app.middleware.rate_limit import limiter
from app.routers import auth, classes, threads, materials, chat
from app.database import engine, Base
from app.services.ai_client import ai_provider_name, ai_health_check
from app.services.storage import MemoryStorage
from app import models  # noqa: F401  registers the ORM tables

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Create all tables on startup
Base.metadata.create_all(bind=engine)

# ── CORS origins from env (supports dev localhost + production domain) ──────
_cors_origins = [o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()]

app = FastAPI(
    title="SmartUstaz",
    description="AI assistant for teachers: lesson plans, presentations and tests.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Demo mode keeps classes and materials in memory for the life of the process
app.state.demo_storage = MemoryStorage() if settings.DEMO_MODE else None

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth.router)
app.include_router(classes.router)
app.include_router(threads.router)
app.include_router(materials.router)
app.include_router(chat.router)


@app.on_event("startup")
async def on_startup():
    """Log the storage mode and AI provider."""
    if settings.DEMO_MODE:
        print("\n  ✓  Demo mode: classes and materials are kept in memory\n")

    provider = ai_provider_name()
    if provider == "none":
        print("\n" + "="*60)
        print("  ⚠  AI NOT CONFIGURED")
        print("  Set one of these in backend/.env:")
        print("    OPENAI_API_KEY=sk-...")
        print("    ANTHROPIC_API_KEY=sk-ant-...")
        print("  and restart. Visit /api/health/ai to verify.")
        print("="*60 + "\n")
    else:
        print(f"\n  ✓  AI provider: {provider}\n")


@app.get("/")
def root():
    return {
        "name": "SmartUstaz API",
        "version": "1.0.0",
        "docs": "/docs",
        "ai_provider": ai_provider_name(),
        "demo_mode": settings.DEMO_MODE,
    }


@app.get("/health")
def health():
    return {"status": "ok", "ai_provider": ai_provider_name()}


@app.get("/api/health/ai")
async def health_ai():
    """Live connectivity test for the configured AI provider.

    Returns:
        provider: which AI is active
        status:   "ok" | "error" | "unconfigured"
        test_reply / error: result of a tiny test call
    """
    return await ai_health_check()
