import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledger.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Ensure all SQLAlchemy models are imported before the metadata is used
import ledger.models  # noqa: E402,F401

from ledger.api import transactions  # noqa: E402

# Ops/system endpoints (/health, /version)
from ledger.api.system import router as system_router  # noqa: E402

app = FastAPI(title="Session Ledger")

# --- CORS for local frontend dev (credentials on, the session lives in a cookie) ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(system_router)  # /health, /version
app.include_router(transactions.router)  # /transactions (router defines its own prefix)
