# backend/database.py
import threading

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv

from config import settings

load_dotenv()

# 1. Adres bazy z konfiguracji (domyślnie SQLite w pamięci)
SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# 2. Poprawka dla Heroku/Azure (postgres:// -> postgresql://)
if SQLALCHEMY_DATABASE_URL.startswith("postgres://"):
    SQLALCHEMY_DATABASE_URL = SQLALCHEMY_DATABASE_URL.replace("postgres://", "postgresql://", 1)

# 3. Konfiguracja zależna od bazy
engine_kwargs = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if SQLALCHEMY_DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every session would get its own empty database
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

Base = declarative_base()

# Single mutual-exclusion scope for every store operation in this process
store_lock = threading.RLock()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        # Sessions may share one connection; closing rolls it back
        with store_lock:
            db.close()

def init_db():
    # Register all tables on Base.metadata before creating them
    import models.users  # noqa: F401
    import models.product  # noqa: F401
    import models.transaction  # noqa: F401
    import models.log  # noqa: F401

    Base.metadata.create_all(bind=engine)
