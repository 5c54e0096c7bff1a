"""
Codis de tipus d'entitat SSM (Suruhanjaya Syarikat Malaysia).

El codi de 2 dígits és el que apareix a les posicions 5-6 del BRN 2019.
"""
from enum import Enum
from typing import Optional


class EntityCode(str, Enum):
    LocalCompany = "01"      # ROC
    ForeignCompany = "02"    # ROC
    Business = "03"          # ROB
    LLP = "04"               # LLP local
    ForeignLLP = "05"
    ProfessionalLLP = "06"   # LLP per pràctica professional

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Nom llegible del tipus d'entitat."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["EntityCode"]:
        """
        Coincidència exacta amb el codi de 2 caràcters, sense normalitzar.
        Retorna None si el codi no existeix (mai llança).
        """
        if not isinstance(code, str):
            return None
        for entity in cls:
            if entity.value == code:
                return entity
        return None

    @classmethod
    def company_codes(cls) -> tuple["EntityCode", ...]:
        return (cls.LocalCompany, cls.ForeignCompany)

    @classmethod
    def llp_codes(cls) -> tuple["EntityCode", ...]:
        return (cls.LLP, cls.ForeignLLP, cls.ProfessionalLLP)


_DISPLAY_NAMES = {
    EntityCode.LocalCompany: "Local Companies",
    EntityCode.ForeignCompany: "Foreign Companies",
    EntityCode.Business: "Business (ROB)",
    EntityCode.LLP: "Local Limited Liability Partnership",
    EntityCode.ForeignLLP: "Foreign Limited Liability Partnership",
    EntityCode.ProfessionalLLP: "Limited Liability Partnership for Professional practice",
}
