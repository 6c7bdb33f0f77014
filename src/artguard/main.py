"""ArtGuard - museum surveillance console.

Main FastAPI application.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from artguard.config import Settings, settings
from artguard.routers.alerts import router as alerts_router
from artguard.routers.cameras import router as cameras_router
from artguard.routers.commands import router as commands_router
from artguard.routers.events import router as events_router

VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Subsystem startup helpers
# ---------------------------------------------------------------------------

def build_console(cfg: Settings):
    """Create the event bus, alert recorder, camera display and console.

    Returns (console, alert_recorder, event_bus).  The display starts its
    grid simulations immediately unless ``simulation_autostart`` is off.
    """
    from camsim.alerts import AlertRecorder
    from camsim.commands.transcript import ChatTranscript
    from camsim.comms.event_bus import EventBus
    from camsim.console import OperatorConsole
    from camsim.floor.catalog import resolve_floor_maps
    from camsim.museum import resolve_museum
    from camsim.simulation.display import CameraDisplay

    event_bus = EventBus()
    museum = resolve_museum(cfg.museum_path)
    floor_maps = resolve_floor_maps(cfg.floor_maps_path)
    alerts = AlertRecorder(cooldown=cfg.alert_cooldown, max_records=cfg.alert_history)

    missing = [c.id for c in museum.cameras if c.id not in floor_maps]
    if missing:
        logger.warning(f"Cameras without floor maps (no_data): {missing}")

    display = CameraDisplay(
        museum,
        floor_maps,
        params=cfg.simulation_params(),
        event_bus=event_bus,
        alert_sink=alerts,
        rescale_policy=cfg.rescale_policy,
        grid_size=cfg.grid_size,
        autostart=cfg.simulation_autostart,
    )
    console = OperatorConsole(
        display,
        museum,
        transcript=ChatTranscript(cfg.transcript_max_messages),
        event_bus=event_bus,
    )
    return console, alerts, event_bus


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("=" * 60)
    logger.info(f"  {settings.app_name.upper()} v{VERSION} - INITIALIZING")
    logger.info("=" * 60)

    console, alerts, event_bus = build_console(settings)
    app.state.console = console
    app.state.alerts = alerts
    app.state.event_bus = event_bus
    logger.info(f"Console online: {len(console.museum.cameras)} cameras registered")

    try:
        yield
    finally:
        logger.info("Stopping camera simulations...")
        console.shutdown()
        app.state.console = None
        logger.info("Shutdown complete")


app = FastAPI(
    title="ArtGuard",
    description="Museum surveillance console",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(cameras_router)
app.include_router(commands_router)
app.include_router(alerts_router)
app.include_router(events_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "operational", "version": VERSION, "system": settings.app_name}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("artguard.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
