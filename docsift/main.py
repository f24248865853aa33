from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .app_logging import configure_logging
from .api.v1.routers import statements
from .config import get_settings

load_dotenv()
configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
  # Missing service credentials stop the process before it accepts uploads.
  settings = get_settings()
  settings.require_service_configuration()
  logger.info("DocSift ready (extraction backend=%s)", settings.extraction_backend)
  yield


app = FastAPI(title="DocSift Bank Statement Parser", version="0.1.0", lifespan=lifespan)

app.add_middleware(
  CORSMiddleware,
  allow_origins=["*"],
  allow_credentials=True,
  allow_methods=["*"],
  allow_headers=["*"],
)

api_router = APIRouter(prefix="/api")
api_router.include_router(statements.router)

app.include_router(statements.router)
app.include_router(api_router)


@app.get("/health")
def health_check():
  return {"status": "healthy", "service": app.title, "version": app.version}
