# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-20
# Description: main.py
# -----------------------------------------------------------------------------
import logging

from fastapi import FastAPI

import settings
from api.routers import documents, health, kb_stats, query

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)


def create_app(*, mount_ui: bool = settings.MOUNT_UI) -> FastAPI:
    api = FastAPI(title="KBRAGDEV API")
    api.include_router(health.router)
    api.include_router(kb_stats.router)
    api.include_router(query.router)
    api.include_router(documents.router)

    if not mount_ui:
        return api

    # Mount Gradio (served by the SAME uvicorn process/port)
    import gradio as gr
    from ui.gradio_app import build_gradio_app

    gradio_blocks = build_gradio_app(api_base_url=settings.API_BASE_URL)
    return gr.mount_gradio_app(api, gradio_blocks, path="/ui")


app = create_app()
