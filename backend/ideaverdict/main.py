import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .services.http_client import close_client
from .config import ValidatorSettings
from .routers.validation import router as validation_router


# Load environment variables from .env file
load_dotenv()

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = ValidatorSettings.from_env()

    # Startup
    print("Starting Idea Verdict")
    print(f"   Research provider:  {settings.research_provider or 'none (internal datasets)'}")
    print(f"   Composite detector: {'on' if settings.use_composite_detector else 'off'}")
    print(f"   Consensus pass:     {'on' if settings.enable_consensus else 'off'}")
    print(f"   False-positive:     {'on' if settings.enable_false_positive else 'off'}")

    yield

    await close_client()
    print("Shutting down Idea Verdict")


app = FastAPI(
    title="Idea Verdict",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:3001",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(validation_router)

@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Idea Verdict",
        "version": "0.1.0",
        "description": "Rule-based startup idea validation and pivot recommendations",
        "docs": "/docs",
        "endpoints": {
            "validate": "POST /validate - Validate a startup idea",
            "pivots": "POST /validate/pivots - Recommend pivots for an idea",
            "healthcare_pivots": "POST /validate/pivots/healthcare - Relevance-checked pivots for regulated ideas",
            "health": "GET /validate/health - Service health check"
        }
    }


@app.get(
    "/health",
    summary="Global Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "idea-verdict",
        "version": "0.1.0"
    }

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "detail": str(exc) if os.getenv("DEBUG", "false").lower() == "true" else "An unexpected error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ideaverdict.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("DEBUG", "true").lower() == "true",
    )
