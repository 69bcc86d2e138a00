from __future__ import annotations

import logging
import os

import uvicorn
from dotenv import load_dotenv

from app.config import get_host, get_log_level, get_port

# Load .env from backend dir (where server.py runs)
load_dotenv(os.path.join(os.path.dirname(__file__), ".env"))

logger = logging.getLogger(__name__)


def main() -> None:
    level = get_log_level()
    logging.basicConfig(level=level)
    host, port = get_host(), get_port()
    logger.info("[server] Server is running on %s:%d", host, port)
    uvicorn.run("app.main:app", host=host, port=port, log_level=level.lower())


if __name__ == "__main__":
    main()
