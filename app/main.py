from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import sys
from pathlib import Path
import logging
import os
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load .env variables
load_dotenv()

# Configure base logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("app")

# Add the parent directory to sys.path
sys.path.append(str(Path(__file__).parent.parent))

from app.routers import auth, sports, sessions, reports
from app.database import engine, Base, SessionLocal
from app.init_db import init_db
import uvicorn

# Create database tables
Base.metadata.create_all(bind=engine)

# Seed initial admin and sample sports
logger.info("Initializing database with initial admin and sports...")
db = SessionLocal()
try:
    init_db(db)
finally:
    db.close()

app = FastAPI(
    title="Sports Scheduler API",
    description="API for scheduling sports sessions, joining teams and viewing reports",
    version="1.0.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[os.getenv("CLIENT_URL", "http://localhost:5173")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix="/auth", tags=["authentication"])
app.include_router(sports.router, prefix="/sports", tags=["sports"])
app.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
app.include_router(reports.router, prefix="/reports", tags=["reports"])


@app.get("/")
def read_root():
    return {"message": "Welcome to Sports Scheduler API"}


@app.get("/health")
def health_check():
    return {"status": "OK", "message": "Sports Scheduler API is running"}


# Global unhandled exception handler -> logs ERROR
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled error | path=%s | method=%s | client=%s",
        request.url.path,
        request.method,
        request.client.host if request.client else "unknown",
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "5000")), reload=True
    )
