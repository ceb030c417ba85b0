"""
Request pass — wires the three steps together and returns a ResultRecord.

Architecture:
  IndexNormalizer → fibonacci → build_result
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from config.settings import Settings, settings as default_settings
from engine.fibonacci import fibonacci
from engine.normalizer import normalize_index
from engine.result import RequestMeta, ResultRecord, build_result

logger = logging.getLogger(__name__)


def compute(
    raw: Optional[str],
    meta: Optional[RequestMeta] = None,
    settings: Settings = default_settings,
) -> ResultRecord:
    """
    Normalize ``raw``, compute F(n) and assemble the response record.
    Never raises for request input: bad text falls back to the default index.
    """
    meta = meta or RequestMeta()
    logger.debug(f"Full URI: {meta.full_uri}")
    logger.debug(f"Path: {meta.path}")
    logger.debug(f"Query: {meta.query}")

    n = normalize_index(
        raw,
        default_index=settings.DEFAULT_INDEX,
        max_index=settings.MAX_INDEX,
    )
    logger.info(f"Extracted number: {n} (raw={raw!r})")

    start = time.perf_counter()
    value = fibonacci(n)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"F({n}) computed in {elapsed_ms:.2f}ms")

    return build_result(n, value, meta, extraction_method=settings.EXTRACTION_METHOD)
