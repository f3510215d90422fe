# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-06
# Updated: 2026-01-20
# Description: StoreHealth
# -----------------------------------------------------------------------------

import logging
from typing import Optional

from utility.logging_utils import get_logger
from vectorstore.KBVectorStore import KBVectorStore


class StoreHealth:
    """
    Healthcheck for the document store: reachable, and able to count.
    """

    def __init__(self, store: KBVectorStore, logger: Optional[logging.Logger] = None):
        self.store = store
        self.logger = logger or get_logger(__name__)

    def run(self) -> bool:
        self.logger.info("Running document store healthcheck")

        if not self.store.test_connection():
            self.logger.error("Document store connection test failed.")
            return False

        try:
            count = self.store.count()
        except Exception as e:
            self.logger.exception("Document store count failed: %s", e)
            return False

        self.logger.info("Document store healthcheck PASSED (%d chunks).", count)
        return True
