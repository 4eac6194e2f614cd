# backend/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from config import settings
from database import SessionLocal, init_db
from services.auth import seed_admin
from services.store import EntityStore
from utils.errors import InternalError, InventoryError

load_dotenv()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Import routerów
from routes.auth import router as auth_router
from routes.products import router as products_router
from routes.transactions import router as transactions_router
from routes.dashboard import router as dashboard_router
from routes.logs import router as logs_router


def bootstrap():
    """Create tables and make sure the default user exists."""
    init_db()
    db = SessionLocal()
    try:
        seed_admin(EntityStore(db), settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    finally:
        db.close()


# Inicjalizacja
bootstrap()

app = FastAPI(title="Inventory Tracker API", version="1.0.0")

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Error handlers ===

@app.exception_handler(InventoryError)
async def handle_inventory_error(request: Request, exc: InventoryError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    # Field-level issues, e.g. {"field": "body.quantity", "message": "..."}
    errors = [
        {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.info("%s %s -> 400: invalid input %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid input", "errors": errors},
    )


@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error in %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalError().to_dict(),
    )


# Rejestracja routerów
app.include_router(auth_router, prefix="/api")
app.include_router(products_router, prefix="/api")
app.include_router(transactions_router, prefix="/api")
app.include_router(dashboard_router, prefix="/api")
app.include_router(logs_router, prefix="/api")

@app.get("/")
def read_root():
    return {"message": "Inventory Tracker API is running"}
