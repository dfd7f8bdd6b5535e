#!/usr/bin/env python3
import uvicorn
from app.app import create_app
from app.core.config import APP_ENV

# Create the FastAPI app
app = create_app()


if __name__ == "__main__":
    # Auto-reload only while developing
    reload_enabled = APP_ENV == "development"
    host = "127.0.0.1" if APP_ENV == "production" else "0.0.0.0"

    print(f"Starting task table on {host}:8000 ({APP_ENV})")
    uvicorn.run("main:app", host=host, port=8000, reload=reload_enabled)
