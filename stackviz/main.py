"""Application entry point."""

import logging

from stackviz.app.controller import StackController
from stackviz.app.session import create_session
from stackviz.infra.config import load_default_env_files, load_visualizer_config
from stackviz.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the Stack Visualizer application."""
    load_default_env_files()
    setup_logging()
    config = load_visualizer_config()
    logger.info(
        "startup speed=%d dark_mode=%s frame_interval_ms=%d",
        config.initial_speed,
        config.dark_mode,
        config.frame_interval_ms,
    )
    controller = StackController(
        create_session(config.limits, speed=config.initial_speed, dark_mode=config.dark_mode)
    )
    # Imported late so the core stays usable without a Qt install.
    from stackviz.qt.bootstrap import run_qt_app

    try:
        return run_qt_app(controller, frame_interval_ms=config.frame_interval_ms)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
