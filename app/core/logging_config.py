"""
Configuration du logging et masquage des données sensibles.

Les logs d'une application de soins à domicile transportent facilement des
informations de santé ou de contact. Le RedactionFilter masque les
identifiants, secrets et PII avant l'émission des records.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from opentelemetry import trace

from app.core.config import Settings

REDACTED_TEXT = "[REDACTED]"
TRUNCATE_LENGTH = 512

LOG_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s] [%(filename)s:%(lineno)d] "
    "[trace_id=%(otelTraceID)s span_id=%(otelSpanID)s "
    "resource.service.name=%(otelServiceName)s trace_sampled=%(otelTraceSampled)s] - %(message)s"
)

_CREDENTIAL_KEY_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"pass(word)?", r"secret", r"token", r"api[-_]?key", r"credential", r"session", r"auth"
    )
]
_PII_KEY_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"email",
        r"phone",
        r"tel",
        r"(first|last|full|given|family)[-_]?name|surname",
        r"^name$",
        r"address",
        r"street",
        r"city",
        r"postal",
        r"zip",
    )
]

_EMAIL_PATTERN = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
_PHONE_PATTERN = re.compile(r"(?<![\w-])\+?\d[\d\s().-]{6,}\d(?![\w-])")
_TOKEN_PATTERN = re.compile(
    r"(bearer\s+[-A-Za-z0-9._~+/]+=*|eyJ[\w-]{10,}\.[\w-]{10,}\.[\w-]{5,})", re.IGNORECASE
)
_CREDENTIAL_VALUE_PATTERN = re.compile(
    r"(api[-_]?key|secret|password|token|session|credential)=?[-A-Za-z0-9._]{4,}", re.IGNORECASE
)

# Attributs standards d'un LogRecord: tout le reste provient de `extra`
_RESERVED_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys() | {"message", "asctime"}
)


def should_redact_key(key: str) -> bool:
    """True si le nom de champ désigne un secret ou une donnée personnelle."""
    return any(p.search(key) for p in _CREDENTIAL_KEY_PATTERNS) or any(
        p.search(key) for p in _PII_KEY_PATTERNS
    )


def _sanitize_string(value: str, key_hint: str | None = None) -> str:
    if key_hint and should_redact_key(key_hint):
        return REDACTED_TEXT
    if (
        _EMAIL_PATTERN.search(value)
        or _PHONE_PATTERN.search(value)
        or _TOKEN_PATTERN.search(value)
        or _CREDENTIAL_VALUE_PATTERN.search(value)
    ):
        return REDACTED_TEXT
    return _truncate(value)


def _truncate(value: str) -> str:
    if len(value) > TRUNCATE_LENGTH:
        return f"{value[:TRUNCATE_LENGTH]}... [truncated]"
    return value


def redact_message(message: str) -> str:
    """Remplace chaque occurrence sensible d'un message rendu, le reste est conservé."""
    for pattern in (_TOKEN_PATTERN, _CREDENTIAL_VALUE_PATTERN, _EMAIL_PATTERN, _PHONE_PATTERN):
        message = pattern.sub(REDACTED_TEXT, message)
    return _truncate(message)


def sanitize(value: Any, key_hint: str | None = None) -> Any:
    """
    Masque récursivement les valeurs sensibles.

    Args:
        value: Valeur à nettoyer (str, mapping, séquence ou scalaire)
        key_hint: Nom du champ porteur de la valeur, s'il est connu

    Returns:
        Copie nettoyée; les scalaires non textuels sont renvoyés tels quels
        sauf si key_hint désigne un champ sensible.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return _sanitize_string(value, key_hint)
    if isinstance(value, Mapping):
        return {key: sanitize(item, str(key)) for key, item in value.items()}
    if isinstance(value, list | tuple | set | frozenset):
        return [sanitize(item, key_hint) for item in value]
    if key_hint and should_redact_key(key_hint):
        return REDACTED_TEXT
    return value


class TraceContextFilter(logging.Filter):
    """
    Garantit les champs otel* attendus par LOG_FORMAT.

    L'instrumentation logging d'OpenTelemetry les pose déjà lorsqu'elle est
    active; sinon ils sont calculés depuis le span courant ("0" hors span).
    """

    def __init__(self, service_name: str = ""):
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "otelTraceID"):
            context = trace.get_current_span().get_span_context()
            if context.is_valid:
                record.otelTraceID = trace.format_trace_id(context.trace_id)
                record.otelSpanID = trace.format_span_id(context.span_id)
            else:
                record.otelTraceID = "0"
                record.otelSpanID = "0"
            record.otelTraceSampled = context.trace_flags.sampled
            record.otelServiceName = self.service_name
        return True


class RedactionFilter(logging.Filter):
    """Filtre masquant les PII dans le message, ses arguments et les champs `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:
        # Rendu avant masquage: les arguments non textuels (partial, Row...) sont formatés ici
        record.msg = redact_message(record.getMessage())
        record.args = None
        for key, value in list(record.__dict__.items()):
            if key not in _RESERVED_RECORD_ATTRS:
                setattr(record, key, sanitize(value, key))
        return True


def configure_logging(settings: Settings) -> None:
    """
    Configure le logger racine une seule fois pour toute l'application.

    Les filtres de corrélation et de masquage sont posés sur chaque handler
    racine afin de couvrir aussi les loggers tiers (uvicorn, sqlalchemy).
    Le format est réappliqué: l'instrumentation OpenTelemetry peut avoir
    créé le handler racine avant nous.
    """
    root = logging.getLogger()
    logging.basicConfig(level=settings.get_log_level(), format=LOG_FORMAT)
    root.setLevel(settings.get_log_level())
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in root.handlers:
        handler.setFormatter(formatter)
        if not any(isinstance(f, TraceContextFilter) for f in handler.filters):
            handler.addFilter(TraceContextFilter(settings.OTEL_SERVICE_NAME))
        if not any(isinstance(f, RedactionFilter) for f in handler.filters):
            handler.addFilter(RedactionFilter())
