import logging
import sys

import uvicorn

from pawpost.core.config import ConfigError, configure_logging, load_settings
from pawpost.main import create_app

logger = logging.getLogger("pawpost")

try:
    settings = load_settings()
except ConfigError as exc:
    configure_logging()
    logger.error("Error: %s", exc)
    sys.exit(1)

configure_logging(settings.log_level)
app = create_app(settings)


if __name__ == "__main__":
    logger.info("Server running at http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
