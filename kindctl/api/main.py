from fastapi import FastAPI
from kindctl.api.routes import validate
from kindctl.logging import setup_logger

logger = setup_logger("kindctl.api")

app = FastAPI(title="kindctl")

app.include_router(validate.router)
