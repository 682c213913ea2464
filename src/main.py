"""
Production FastAPI Application

Restaurant table service: in-memory table state and live order updates.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config import di
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Restaurant Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Restaurant Service] Dependency injection wired')

    # Build the process-wide table state once; it lives until shutdown
    di.setup()
    Logger.base.info('✅ [Restaurant Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Restaurant Service] Shutting down...')

    # Close open SSE channels so their streams finish
    di.cleanup()
    Logger.base.info('📡 [Restaurant Service] Subscriber channels closed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Restaurant Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
