from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__, config
from .routers.estimation import router as estimation_router


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    print("Starting Hackathon Sage")
    config.log_config_status()
    print("   Ready to estimate hackathon ideas!")

    yield

    print("Shutting down Hackathon Sage")


app = FastAPI(
    title="Hackathon Sage - Feasibility Estimator",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(estimation_router)


def _estimator_endpoints() -> list[str]:
    return [
        f"{method} {route.path}"
        for route in estimation_router.routes
        for method in sorted(route.methods)
    ]


@app.get("/", summary="API Root", tags=["General"])
async def root():
    """Service name, version and the estimator endpoints."""
    return {
        "name": "Hackathon Sage",
        "version": __version__,
        "docs": "/docs",
        "endpoints": _estimator_endpoints(),
    }


@app.get("/health", summary="Global Health Check", tags=["General"])
async def health():
    return {"status": "healthy", "version": __version__}


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "detail": str(exc) if config.DEBUG else "An unexpected error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hackathon_sage.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
    )
