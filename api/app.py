from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from radar.engine import TargetingEngine
from radar.model import Found, NotFound, Result
from .config import Settings, get_settings
from .logs import configure_logging
from .schemas import CoordinateOut, MessageResponse, RadarRequest, RadarResponse

MSG_SYNTAX_ERROR = "Syntax Error. Body badly formatted"

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging when the app starts."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Radar API ready (strict_protocols={settings.strict_protocols})")
    yield

app = FastAPI(title="Radar Targeting API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

def _respond(status: int, message: str, data: CoordinateOut | None = None) -> JSONResponse:
    """Wrap a result in the response envelope."""
    body = RadarResponse(status_ok=status == 200, message=message)
    if data is not None:
        body.data = data
    return JSONResponse(status_code=status, content=body.model_dump(by_alias=True))

def _to_response(result: Result) -> JSONResponse:
    """Map an engine outcome onto its HTTP status."""
    if isinstance(result, Found):
        c = result.coordinate
        return _respond(200, result.message, CoordinateOut(x=c.x, y=c.y))
    if isinstance(result, NotFound):
        return _respond(404, result.message)
    return _respond(400, result.message)

def get_engine(settings: Settings = Depends(get_settings)) -> TargetingEngine:
    """Build the targeting engine from settings."""
    return TargetingEngine(strict=settings.strict_protocols)

@app.exception_handler(RequestValidationError)
async def bad_body(request: Request, exc: RequestValidationError):
    """Report malformed bodies as 400 instead of FastAPI's 422."""
    logger.warning(f"Malformed body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content=MessageResponse(message=MSG_SYNTAX_ERROR).model_dump())

@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "message": "Radar Targeting API",
        "docs": "/docs",
        "version": "1.0"
    }

@app.get("/health")
async def health():
    """Liveness probe."""
    return {"status": "ok"}

@app.post("/radar")
async def radar(req: RadarRequest, engine: TargetingEngine = Depends(get_engine)):
    """Return the next coordinate to engage."""
    logger.debug(f"[API] Received {len(req.scan or [])} points, protocols {req.protocols}")
    return _to_response(engine.resolve(req.protocols, req.scan))
