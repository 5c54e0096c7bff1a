"""
Logging estructurat de la llibreria.

La llibreria només crea loggers sota "myssm"; l'aplicació que la fa servir
decideix si crida configure_logging() o enganxa els seus propis handlers.
"""
import json
import logging
from myssm.config import settings

_HANDLER_NAME = "myssm-json"


class _JsonFormatter(logging.Formatter):
    """Format JSON per logs estructurats (compatible amb Datadog, Loki, etc.)"""
    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        # Afegir camps extra (context del parseig)
        for key, val in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = val
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


# Atributs estàndard d'un LogRecord (no són "extra")
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Afegeix un StreamHandler al logger "myssm". Idempotent: cridar-ho
    dues vegades no duplica el handler.
    """
    root = logging.getLogger("myssm")
    root.setLevel((level or settings.log_level).upper())

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        if settings.log_json:
            handler.setFormatter(_JsonFormatter())
        else:
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        root.addHandler(handler)

    root.propagate = False
    return root
