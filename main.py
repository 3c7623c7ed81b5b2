from dotenv import load_dotenv

load_dotenv()

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import get_allowed_origins
from core.exceptions import SchemaStudioError
from core.logger import get_logger
from core.middleware import RequestLogMiddleware
from database.database import init_db
from routes import databases
from routes import tables
from routes import attributes
from routes import table_data
from routes import erd
from routes import insights
from schemas.common import envelope

logger = get_logger("schema_studio")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="Schema Studio", lifespan=lifespan)

allowed_origins = get_allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allowed_origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLogMiddleware)


@app.exception_handler(SchemaStudioError)
async def schema_studio_error_handler(request: Request, exc: SchemaStudioError):
    return JSONResponse(status_code=exc.status_code, content=envelope(success=False, message=exc.message))


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=envelope(success=False, message=format_validation_errors(exc.errors())),
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=envelope(success=False, message=str(exc.detail)))


@app.exception_handler(Exception)
async def internal_server_error_handler(request: Request, exc: Exception):
    # The underlying error stays server-side
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=envelope(success=False, message="Internal server error"),
    )


def format_validation_errors(errors) -> str:
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        msg = error.get("msg", "Invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(messages) or "Invalid request"


@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "schema-studio"}


# Routes
app.include_router(databases.router)
app.include_router(tables.router)
app.include_router(attributes.router)
app.include_router(table_data.router)
app.include_router(erd.router)
app.include_router(insights.router)
