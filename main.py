"""
Broz Kinks API Entry Point

  uvicorn main:app --host 0.0.0.0 --port $PORT
"""

import logging

from broz import config

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

from api_server import app  # noqa: E402


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=True)
