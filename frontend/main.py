import logging

from fastapi import FastAPI

from frontend.config import AppConfig, load_config
from frontend.features.config.validation import validate_routing
from frontend.web.health import router as health_router

logger = logging.getLogger(__name__)


def create_app(cfg: AppConfig | None = None) -> FastAPI:
    """Build the frontend app. Config errors abort start-up.

    Run with `uvicorn frontend.main:create_app --factory`.
    """

    if cfg is None:
        cfg = load_config()
    validate_routing(cfg)

    app = FastAPI(title="GCS Frontend", version="0.1.0")
    app.state.cfg = cfg
    app.include_router(health_router)
    logger.info("Frontend ready: webroot=%s hook=%s gcs=%s", cfg.web_root, cfg.hook_path, cfg.gcs_base)
    return app
