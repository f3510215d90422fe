# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-20
# Description: dependencies.py
# -----------------------------------------------------------------------------
from functools import lru_cache

from api.AppContainer import AppContainer
from services.KBDocumentService import KBDocumentService
from services.KBHealthService import KBHealthService
from services.KBIngestService import KBIngestService
from services.KBQueryService import KBQueryService
from services.KBStatsService import KBStatsService


@lru_cache
def get_container() -> AppContainer:
    # built on first request, then shared
    return AppContainer()

def get_health_service() -> KBHealthService:
    return get_container().health_service

def get_ingest_service() -> KBIngestService:
    return get_container().ingest_service

def get_query_service() -> KBQueryService:
    return get_container().query_service

def get_document_service() -> KBDocumentService:
    return get_container().document_service

def get_stats_service() -> KBStatsService:
    return get_container().stats_service
