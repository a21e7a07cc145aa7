from __future__ import annotations

import logging

from student_dashboard import config, create_app
from student_dashboard.logging_config import setup_logging
from student_dashboard.routes.common import EXTENSION_KEY

logger = logging.getLogger(__name__)

setup_logging()
app = create_app()


def main() -> None:
    logger.info(
        "Starting student dashboard API (%s) on %s:%s",
        config.get_environment(),
        config.get_host(),
        config.get_port(),
    )
    try:
        app.run(
            host=config.get_host(),
            port=config.get_port(),
            debug=config.get_environment() == "development",
            use_reloader=False,
        )
    finally:
        app.extensions[EXTENSION_KEY].database.close()


if __name__ == "__main__":
    main()
