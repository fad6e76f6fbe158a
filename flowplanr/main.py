# flowplanr/main.py
import logging
from fastapi import FastAPI
from sqlalchemy import exc as sa_exc
from flowplanr.config import settings
from flowplanr.database import engine, Base
from flowplanr.models import entry, user  # noqa: F401  register tables
from flowplanr.routers import auth, entries, dashboard, export

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="FlowPlanr - Daily Journal & Smart Export", version="1.0")

# Include Routers
app.include_router(auth.router)
app.include_router(entries.router)
app.include_router(dashboard.router)
app.include_router(export.router)

# Create DB Tables (for local use; alembic/versions has the same schema)
@app.on_event("startup")
async def startup_event():
    # ignore duplicate-object errors from previous partial runs
    async with engine.begin() as conn:
        try:
            await conn.run_sync(Base.metadata.create_all)
        except sa_exc.IntegrityError as e:
            msg = str(getattr(e, "orig", e))
            if "duplicate key value violates unique constraint" in msg or "already exists" in msg:
                logger.warning("Ignored duplicate DDL error during create_all: %s", msg)
            else:
                raise

@app.get("/")
def read_root():
    return {"message": "Welcome to FlowPlanr"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("flowplanr.main:app", host="127.0.0.1", port=8000, reload=True)
