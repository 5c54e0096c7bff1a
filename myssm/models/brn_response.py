"""
Model de resposta per BRN — Contracte unificat v1
"""
from pydantic import BaseModel
from typing import Optional, Literal, List
from myssm.models.base_response import ValidationItem, MetaInfo


class BRNDatos(BaseModel):
    """Dades extretes d'un BRN (tots dos formats)."""

    # Representació formal combinada: "201901000005 (1312525-A)"
    formal: Optional[str] = None

    # Format 2019
    numero_2019: Optional[str] = None              # "201901000005"
    any_registre: Optional[int] = None             # 2019
    codigo_entidad: Optional[str] = None           # "01"
    tipo_entidad: Optional[str] = None             # "Local Companies"
    secuencia_2019: Optional[str] = None           # "000005"

    # Format clàssic
    numero_clasico: Optional[str] = None           # "1312525-A"
    tipo_entidad_clasico: Optional[str] = None     # "LocalCompany"
    secuencia_clasica: Optional[str] = None        # "1312525"
    digito_control: Optional[str] = None           # "A"


class BRNValidationResponse(BaseModel):
    """Resposta de validació BRN — Contracte unificat v1."""
    valido: bool
    tipo_documento: Literal["brn"] = "brn"
    datos: BRNDatos
    alertas: List[ValidationItem] = []
    errores_detectados: List[ValidationItem] = []
    meta: Optional[MetaInfo] = None
