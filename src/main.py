# src/main.py
# Responsibility: Application entry point. Configures and launches the FastAPI app.

import uvicorn
from fastapi import FastAPI

from src.config.settings import settings
from src.routers import search

VERSION = "1.0.0"


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.
    """
    app = FastAPI(
        title="Attendee Search",
        description="Multilingual attendee lookup for conference check-in.",
        version=VERSION,
        debug=settings.SERVER.DEBUG
    )

    # Register Routers
    app.include_router(search.router)

    # Health Check
    @app.get("/health", tags=["System"])
    def health_check():
        return {"status": "ok", "version": VERSION}

    return app

# Application instance
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host=settings.SERVER.HOST,
        port=settings.SERVER.PORT,
        reload=settings.SERVER.DEBUG
    )
