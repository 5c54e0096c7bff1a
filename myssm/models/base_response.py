"""
Contracte unificat de resposta de validació (v1)

Tots els documents retornen aquest format:
{
  "valido": bool,
  "tipo_documento": "brn|...",
  "datos": { <document-specific> },
  "alertas": [ ValidationItem, ... ],
  "errores_detectados": [ ValidationItem, ... ],
  "meta": { "success": bool, "message": "..." }
}

Regles:
  valido = True si i només si cap error de severitat "critical"
  a errores_detectados.
"""
from pydantic import BaseModel
from typing import Optional, Literal


class ValidationItem(BaseModel):
    """Ítem normalitzat d'error o alerta."""
    code: str                                          # p.ex. "BRN2019_YEAR_INVALID"
    severity: Literal["warning", "error", "critical"]
    field: Optional[str] = None                        # camp afectat
    message: str                                       # text llegible
    evidence: Optional[str] = None                     # valor llegit que genera el problema
    suggested_fix: Optional[str] = None                # recomanació


class MetaInfo(BaseModel):
    """Informació de transport."""
    success: bool
    message: Optional[str] = None


def has_critical(errores: list[ValidationItem]) -> bool:
    return any(e.severity == "critical" for e in errores)
