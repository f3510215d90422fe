# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-28
# Updated: 2026-01-20
# Description: gradio_app.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

import gradio as gr
import pandas as pd
import requests


# Environment configuration
API_BASE_URL = os.getenv("KB_API_BASE_URL", "http://127.0.0.1:8000").rstrip("/")
LOG_FILE = os.getenv("KB_LOG_FILE", "./logs/kbragdev.log")
LOG_TAIL_LINES = int(os.getenv("KB_UI_LOG_TAIL_LINES", "400"))
TIMEOUT_SECONDS = int(os.getenv("KB_UI_TIMEOUT_SECONDS", "30"))


# Small URL helpers
def _url(path: str) -> str:
    return f"{API_BASE_URL}{path}"


def _request(method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    try:
        r = requests.request(method, _url(path), json=payload, timeout=TIMEOUT_SECONDS)
        if not r.ok:
            return {"error": f"HTTP {r.status_code}: {r.text}"}
        return r.json()
    except requests.exceptions.RequestException as e:
        return {"error": f"API request failed: {e}"}


def _as_json(out: Dict[str, Any]) -> str:
    return json.dumps(out, indent=2)


# Log tailing for UI
def tail_log_file(path: str, n_lines: int = 200) -> str:
    """Tail last n_lines from a local log file path."""
    if not path or not os.path.exists(path):
        return f"[log] file not found: {path}"
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            lines = f.read().splitlines()[-int(n_lines):]
    except OSError as e:
        return f"[log] failed to read log file: {e}"
    return "\n".join(lines)


# Ask
def ui_ask(question: str, show_matches: bool) -> Tuple[str, str, pd.DataFrame]:
    question = (question or "").strip()
    if not question:
        return "Please enter a question.", "", pd.DataFrame()

    out = _request("POST", "/query", {"q": question, "include_matches": bool(show_matches)})
    if "error" in out:
        return out["error"], "", pd.DataFrame()

    confidence = f"{out.get('confidence', 0)}% ({out.get('tier', '?')})"
    return out.get("answer", ""), confidence, pd.DataFrame(out.get("matches") or [])


# Documents
def ui_ingest(doc_id: str, title: str, category: str, text: str) -> str:
    payload = {
        "doc_id": (doc_id or "").strip(),
        "text": text or "",
        "metadata": {"title": (title or "").strip() or None, "category": (category or "").strip() or None},
    }
    return _as_json(_request("POST", "/documents/ingest", payload))


def ui_count() -> str:
    return _as_json(_request("GET", "/documents"))


def ui_clear() -> str:
    return _as_json(_request("DELETE", "/documents"))


def ui_delete_document(doc_id: str) -> str:
    doc_id = (doc_id or "").strip()
    if not doc_id:
        return _as_json({"error": "doc_id required"})
    return _as_json(_request("DELETE", f"/documents/{quote(doc_id, safe='')}"))


def ui_load_sample() -> str:
    return _as_json(_request("POST", "/documents/sample"))


# Stats / health
def ui_get_stats() -> Tuple[str, pd.DataFrame]:
    stats = _request("GET", "/stats")
    return _as_json(stats), pd.DataFrame(stats.get("documents") or [])


def ui_health(deep: bool) -> str:
    return _as_json(_request("GET", "/health/deep" if deep else "/health"))


# Build Gradio UI
def build_gradio_app(api_base_url: str = API_BASE_URL) -> gr.Blocks:
    global API_BASE_URL
    API_BASE_URL = api_base_url.rstrip("/")

    with gr.Blocks(title="KBRAGDEV UI", analytics_enabled=False) as demo:
        gr.Markdown(f"""# KBRAGDEV (knowledge-base answers) **API:** `{API_BASE_URL}`  **Log file:** `{LOG_FILE}`""")

        with gr.Tab("Ask"):
            question = gr.Textbox(label="Question", placeholder="What colour is the sky?")
            show_matches = gr.Checkbox(value=False, label="Show top matches")
            ask_btn = gr.Button("Ask (/query)")
            answer = gr.Textbox(label="Answer", lines=4, interactive=False)
            confidence = gr.Textbox(label="Confidence", interactive=False)
            matches_df = gr.Dataframe(label="Top matches", interactive=False)
            ask_btn.click(fn=ui_ask, inputs=[question, show_matches], outputs=[answer, confidence, matches_df])

        with gr.Tab("Documents"):
            gr.Markdown("### Ingest a document")
            with gr.Row():
                doc_id = gr.Textbox(label="doc_id", placeholder="general-1")
                title = gr.Textbox(label="title (optional)")
                category = gr.Textbox(label="category (optional)", placeholder="general")
            text = gr.Textbox(label="text", lines=8)
            ingest_btn = gr.Button("Ingest (/documents/ingest)")

            gr.Markdown("### Corpus actions")
            with gr.Row():
                count_btn = gr.Button("Count chunks")
                sample_btn = gr.Button("Load sample data")
                clear_btn = gr.Button("Clear all")
            with gr.Row():
                delete_id = gr.Textbox(label="doc_id to delete")
                delete_btn = gr.Button("Delete document")
            action_out = gr.Code(label="Action output (JSON)", language="json")

            ingest_btn.click(fn=ui_ingest, inputs=[doc_id, title, category, text], outputs=[action_out])
            count_btn.click(fn=ui_count, inputs=[], outputs=[action_out])
            sample_btn.click(fn=ui_load_sample, inputs=[], outputs=[action_out])
            clear_btn.click(fn=ui_clear, inputs=[], outputs=[action_out])
            delete_btn.click(fn=ui_delete_document, inputs=[delete_id], outputs=[action_out])

        with gr.Tab("Stats"):
            stats_btn = gr.Button("Refresh stats (/stats)")
            stats_json = gr.Code(label="Stats JSON", language="json")
            stats_docs_df = gr.Dataframe(label="Indexed documents", interactive=False)
            stats_btn.click(fn=ui_get_stats, inputs=[], outputs=[stats_json, stats_docs_df])

        with gr.Tab("Health"):
            deep = gr.Checkbox(value=False, label="Deep (runs store + embedding smoke tests)")
            health_btn = gr.Button("Check health")
            health_out = gr.Code(label="Health JSON", language="json")
            health_btn.click(fn=ui_health, inputs=[deep], outputs=[health_out])

        with gr.Tab("Logs"):
            with gr.Row():
                log_path = gr.Textbox(label="Log file path", value=LOG_FILE)
                tail_lines = gr.Slider(50, 2000, value=LOG_TAIL_LINES, step=50, label="Tail lines")
                refresh_logs_btn = gr.Button("Refresh logs")
            log_view = gr.Textbox(label="Logs", value="", lines=25, interactive=False)
            refresh_logs_btn.click(fn=tail_log_file, inputs=[log_path, tail_lines], outputs=[log_view])

    return demo
