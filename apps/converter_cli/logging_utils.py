from __future__ import annotations

import logging
import sys

from packages.image_base64.logging_utils import TraceAdapter, ensure_trace_id

__all__ = ["TraceAdapter", "configure_logging"]


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s trace_id=%(trace_id)s message=%(message)s",
        stream=sys.stderr,
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(ensure_trace_id)
