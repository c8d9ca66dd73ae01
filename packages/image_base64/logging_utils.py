from __future__ import annotations

import logging


class TraceAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        kwargs.setdefault("extra", {})
        kwargs["extra"].setdefault("trace_id", self.extra.get("trace_id", "n/a"))
        return msg, kwargs


def trace_logger(name: str, trace_id: str | None) -> TraceAdapter:
    return TraceAdapter(logging.getLogger(name), {"trace_id": trace_id or "n/a"})


def ensure_trace_id(record: logging.LogRecord) -> bool:
    # Records from third-party loggers (httpx, uvicorn) carry no trace id.
    if not hasattr(record, "trace_id"):
        record.trace_id = "n/a"
    return True
