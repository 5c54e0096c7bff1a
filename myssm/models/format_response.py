"""
Resultats de parseig per cada format de BRN.

Format2019     → "201901000005"   (any + codi entitat + seqüència de 6 dígits)
FormatClassic  → "1312525-A"      (ROB / ROC / LLP / AF / LL, anterior a 2019)

Tots dos comparteixen la capacitat BRNFormat però són models independents.
"""
import re
from pydantic import BaseModel
from typing import Optional, Protocol, runtime_checkable
from myssm.models.entity_code import EntityCode

# Longitud de la seqüència ROC quan es mostren zeros inicials
ROC_SEQUENCE_NUM_LENGTH = 7


@runtime_checkable
class BRNFormat(Protocol):
    """Capacitat comuna dels dos formats."""

    def is_valid(self) -> bool: ...

    def is_entity(self, entity_type: EntityCode) -> bool: ...

    def get_sequence_number(self) -> Optional[str]: ...

    def get_error_message(self) -> Optional[str]: ...

    def to_formal(self) -> Optional[str]: ...


class Format2019(BaseModel):
    """BRN format 2019 (en ús des de l'11 d'octubre de 2019)"""

    raw_input: Optional[str] = None           # "201901000005"
    valid: bool = False
    entity_type: Optional[EntityCode] = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None          # "BRN2019_YEAR_INVALID"

    year: Optional[int] = None                # 2019
    sequence_number: Optional[str] = None     # "000005"

    def is_valid(self) -> bool:
        return self.valid

    def is_entity(self, entity_type: EntityCode) -> bool:
        return self.valid and self.entity_type == entity_type

    def get_year(self) -> Optional[int]:
        return self.year if self.valid else None

    def get_entity_code(self) -> Optional[str]:
        """Codi de 2 caràcters ("01"), o None."""
        return self.entity_type.value if self.entity_type else None

    def get_entity_type(self) -> Optional[str]:
        """Nom llegible del tipus d'entitat ("Local Companies"), o None."""
        return self.entity_type.display_name if self.entity_type else None

    def get_sequence_number(self) -> Optional[str]:
        return self.sequence_number

    def get_error_message(self) -> Optional[str]:
        return self.error_message

    def to_formal(self) -> Optional[str]:
        return self.raw_input if self.valid else None

    def __str__(self) -> str:
        return self.to_formal() or ""


class FormatClassic(BaseModel):
    """BRN format clàssic (ROB, ROC, LLP)"""

    raw_input: Optional[str] = None           # "1312525-A"
    valid: bool = False
    entity_type: Optional[EntityCode] = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None

    sequence_number: Optional[str] = None     # "1312525"
    check_digit: Optional[str] = None         # "A" | "LGN" | "LCA" | None
    leading_zeros_enabled: bool = False       # només afecta la presentació

    def leading_zeros(self, enable: bool = True) -> "FormatClassic":
        """Activa els zeros inicials a la seqüència (ROC → 7 dígits)."""
        self.leading_zeros_enabled = enable
        return self

    def is_valid(self) -> bool:
        return self.valid

    def is_entity(self, entity_type: EntityCode) -> bool:
        """
        El format clàssic no distingeix companyia local i estrangera:
        totes dues consultes es comparen amb LocalCompany.
        """
        if not self.valid:
            return False
        if entity_type in EntityCode.company_codes():
            return self.entity_type == EntityCode.LocalCompany
        return self.entity_type == entity_type

    def get_entity_type(self) -> Optional[EntityCode]:
        return self.entity_type if self.valid else None

    def get_sequence_number(self) -> Optional[str]:
        if not self.valid:
            return None
        seq = self.sequence_number or ""
        if (
            self.leading_zeros_enabled
            and self.entity_type != EntityCode.Business
            and re.match(r"^[1-9]", seq)
        ):
            return seq.rjust(ROC_SEQUENCE_NUM_LENGTH, "0")
        return self.sequence_number

    def get_check_digit(self) -> Optional[str]:
        return self.check_digit

    def get_error_message(self) -> Optional[str]:
        return self.error_message

    def to_formal(self) -> Optional[str]:
        if not self.valid:
            return None
        if self.check_digit:
            return f"{self.get_sequence_number()}-{self.check_digit}"
        return self.get_sequence_number()

    def __str__(self) -> str:
        return self.to_formal() or ""
