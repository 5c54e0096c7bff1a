"""
Utilitats de redacció per a logs

Els BRN poden arribar enganxats a text lliure del client (noms, adreces):
mai s'escriu el text d'entrada en clar als logs si settings.redact_logs.
"""
from typing import Optional
from myssm.config import settings


def redact_brn(brn: Optional[str]) -> str:
    """
    Redacta un BRN per a logs.
    "201901000005" → "2019*******5"
    "1312525-A"    → "1312****A"
    """
    if not brn or len(brn) < 6:
        return "***"
    return brn[:4] + "*" * (len(brn) - 5) + brn[-1]


def redact_text(text: Optional[str]) -> str:
    """
    Redacta text lliure: només se'n registra la longitud.
    "201901000005 (1312525-A)" → "<24 chars>"
    """
    if text is None:
        return "<none>"
    return f"<{len(text)} chars>"


def safe_brn(brn: Optional[str]) -> Optional[str]:
    """Aplica redact_brn només si la redacció està activada."""
    if brn is None or not settings.redact_logs:
        return brn
    return redact_brn(brn)


def redact_parse_info(text: Optional[str], formal: Optional[str], valid: bool) -> dict:
    """
    Retorna un dict segur per a logging: dades tècniques sense el text original.
    """
    if not settings.redact_logs:
        return {"input": text, "formal": formal, "valid": valid}
    return {
        "input_redacted": redact_text(text),
        "formal_redacted": redact_brn(formal) if formal else None,
        "valid": valid,
    }
