# main.py
import os
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST

# --- Environment loading ---
load_dotenv()

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# --- Local Module Imports ---
# These must come after the dotenv load
from storage import initialize_storage, get_data_dir
from routers import projects, tasks

# --- App Lifecycle (Lifespan) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    print(f"Application starting up (data directory: {get_data_dir().resolve()})...")
    # Create the collection files if they don't exist
    initialize_storage()

    yield

    print("Application shutting down...")


# --- FastAPI App Initialization ---
app = FastAPI(
    title="Project Tracker",
    description="Projects and their tasks, stored as flat JSON files.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error Envelope ---
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Renders every HTTP error as {"message": ...}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors: answer 400 instead of 422."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    reason = first.get("msg", "Invalid request body.")
    message = f"{location}: {reason}" if location else reason
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"message": message})

# --- Include API Routers ---
app.include_router(projects.router)
app.include_router(tasks.router)

# --- Main Entry Point ---
if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.getenv("HOST", DEFAULT_HOST),
        port=int(os.getenv("PORT", DEFAULT_PORT)),
    )
