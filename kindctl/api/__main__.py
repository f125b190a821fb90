import uvicorn

from kindctl.api.main import app, logger
from kindctl.config import Settings

if __name__ == "__main__":
    logger.info(f"Serving kindctl API on {Settings.API_HOST}:{Settings.API_PORT}")
    uvicorn.run(app, host=Settings.API_HOST, port=Settings.API_PORT)
