# app.py (Sláinte Finance Plan Backend)

from fastapi import FastAPI

from api.v1.plan import router as v1_plan_router
from utils.logger import get_logger

logger = get_logger("slainte")

app = FastAPI(
    title="Sláinte Finance Plan Backend",
    description="Turns a personal-finance questionnaire into a prioritised, time-sequenced action plan.",
    version="1.0.0",
)


# Root Endpoint (basic health check)
@app.get("/", tags=["Health"])
def read_root():
    return {"message": "Sláinte plan service is running. Plan endpoints are under /api/v1/..."}


# -----------------------------------------------------------
# ROUTER REGISTRATION
# -----------------------------------------------------------

app.include_router(v1_plan_router, prefix="/api/v1")
