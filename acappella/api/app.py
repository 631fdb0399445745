"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging in the worker process (visible with uvicorn --reload)
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from acappella.api.state import AppState, get_state
from acappella.config import WEB_ORIGIN, ensure_data_dir

# Import routes after state to avoid circular imports
from acappella.api.routes import content, donations, events, members, quotations, songs

__all__ = ["app", "AppState", "get_state"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_data_dir()
    logging.getLogger(__name__).info("Record store: %s", get_state().store.path)
    yield


app = FastAPI(
    title="The Light Acappella API",
    description="Records behind the group's website: events, songs, members, bookings, donations",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[WEB_ORIGIN] if WEB_ORIGIN else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(events.router, prefix="/api/events", tags=["events"])
app.include_router(songs.router, prefix="/api/songs", tags=["songs"])
app.include_router(members.router, prefix="/api/members", tags=["members"])
app.include_router(quotations.router, prefix="/api/quotations", tags=["quotations"])
app.include_router(donations.router, prefix="/api/donations", tags=["donations"])
app.include_router(content.router, prefix="/api/content", tags=["content"])


@app.get("/api/health")
def health():
    return {"ok": True}
