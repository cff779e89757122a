import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.db.base import init_db
from app.routers import admin, blog
from app.schemas.responses import failure
from app.security import get_staff_token
from app.settings import settings
from app.utils import utcnow

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Pan Logistics Blog API", description="Blog content store")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES:
        init_db()
        logger.info("Database schema ready")
    yield
    logger.info("Blog API shut down")


app.router.lifespan_context = lifespan

app.include_router(blog.router, prefix=settings.API_PREFIX)
app.include_router(
    admin.router,
    prefix=settings.API_PREFIX,
    dependencies=[Depends(get_staff_token)],
)


@app.get("/")
async def root():
    return {"message": "Pan Logistics Blog API is running"}


@app.get("/api/health")
async def health():
    return {"status": "ok", "timestamp": utcnow().isoformat()}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    response = failure(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return failure(422, "Invalid request", exc.errors())
