"""
Template Builder Server
=======================

FastAPI server for the section/column/component template editor.

Features:
- In-memory editing sessions, one template per session
- Section and component editing with fail-soft operations
- Standalone HTML export of the current template
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from .api import component_routes, section_routes, template_routes
from .editor.component_defaults import COMPONENT_CATALOG
from .editor.session_manager import SessionManager
from .models.template_models import CanvasDimensions


# Shared service instances
session_manager: Optional[SessionManager] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global session_manager

    logger.info("[TEMPLATE-BUILDER] Starting up...")

    session_manager = SessionManager(
        default_template_name=settings.default_template_name,
        default_canvas=CanvasDimensions(
            width=settings.default_canvas_width,
            height=settings.default_canvas_height,
        ),
    )

    # Inject into route modules (section and component routes resolve
    # sessions through template_routes)
    template_routes.session_manager = session_manager

    logger.info("[TEMPLATE-BUILDER] Services initialized")

    yield

    logger.info("[TEMPLATE-BUILDER] Shutting down...")
    template_routes.session_manager = None


# Create FastAPI app
app = FastAPI(
    title="Template Builder",
    description="Section/column/component template editor with HTML export",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(template_routes.router)
app.include_router(section_routes.router)
app.include_router(component_routes.router)


@app.get("/")
async def root():
    """Return API info."""
    return {
        "service": "Template Builder",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "templates": "/api/templates/{session_id}",
            "sections": "/api/sections/{session_id}",
            "components": "/api/components/{session_id}",
            "export": "/api/templates/{session_id}/export"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "sessions": len(session_manager.list_sessions()) if session_manager else 0
    }


@app.get("/api/info")
async def api_info():
    """Get the component palette and canvas defaults."""
    return {
        "service": "Template Builder",
        "version": "1.0.0",
        "component_types": COMPONENT_CATALOG,
        "sections": {
            "min_columns": 1,
            "max_columns": settings.max_section_columns
        },
        "canvas": {
            "width": settings.default_canvas_width,
            "height": settings.default_canvas_height
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "template_builder.server:app",
        host="0.0.0.0",
        port=8080,
        reload=True
    )
