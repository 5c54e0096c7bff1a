"""
Parser del BRN format clàssic (anterior a 2019)

Subformats, en ordre de precedència dins la mateixa alternança:
  ROB  AC0000003-D | 000125034-M        (2 lletres + 7 dígits | 9 dígits) + lletra
  ROC  412121-K | 1312525-A             3-7 dígits + lletra
  LLP  LLP0027514-LGN | 0027514-LCA     (LLP)? + 7 dígits + LGN/LCA
  AF   AF123 .. AF123456                AF + 3-6 dígits
  LL   LL04610-L                        LL + 3-6 dígits + lletra opcional

L'ordre importa: amb una entrada ambigua guanya la primera alternativa.
"""
import re
import random
import string
import logging
from typing import Optional
from myssm.exceptions import BRNFormatError
from myssm.models.entity_code import EntityCode
from myssm.models.format_response import FormatClassic, ROC_SEQUENCE_NUM_LENGTH
from myssm.utils.redact import safe_brn

log = logging.getLogger("myssm.parser.classic")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_ROB = r"[A-Z]{2}[\s-]?\d{7}[\s-]?[A-Z]|\d{9}[\s-]?[A-Z]"
_ROC = r"\d{3,7}[\s-]?[A-Z]"
_LLP = r"(?:LLP)?\d{7}[\s-]?(?:LGN|LCA)"
_AF = r"AF\d{3,6}"
_LL = r"LL\d{3,6}[\s-]?[A-Z]?"

# Una sola alternança avaluada un cop: ROB → ROC → LLP → AF → LL
REGEX = re.compile(rf"\b(?:{_ROB}|{_ROC}|{_LLP}|{_AF}|{_LL})\b", re.ASCII)

ROB_MAX_LENGTH = 10
ROB_SEQUENCE_NUM_LENGTH = 9
LLP_SEQUENCE_NUM_LENGTH = 7
LLP_SUFFIXES = ("LGN", "LCA")


def _random_letter(rng) -> str:
    return rng.choice(string.ascii_uppercase)


def _random_padded(rng, width: int, upper: Optional[int] = None) -> str:
    """Número aleatori [1, upper] amb zeros a l'esquerra fins a width."""
    upper = upper if upper is not None else 10 ** width - 1
    return str(rng.randint(1, upper)).zfill(width)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class ClassicParser:

    @staticmethod
    def extract(text: str) -> Optional[str]:
        """Primer candidat clàssic del text (majúscules), o None."""
        m = REGEX.search(text)
        return m.group(0) if m else None

    @staticmethod
    def _classify(brn: str) -> tuple[EntityCode, str, Optional[str]]:
        """Retorna (tipus, seqüència, dígit de control) d'un token normalitzat."""
        if not re.match(r"^[A-Z0-9]+$", brn, re.ASCII):
            raise BRNFormatError("invalid classic BRN format", "BRN_CLASSIC_FORMAT_INVALID")

        # LLP: sufix de 3 lletres fix, es talla per longitud (no per caràcters)
        if brn.startswith("LLP") or brn.endswith(LLP_SUFFIXES):
            return EntityCode.LLP, brn[:-3], brn[-3:]

        if brn.startswith("AF"):
            return EntityCode.LLP, brn, None

        if brn.startswith("LL"):
            return EntityCode.LocalCompany, brn, None

        entity_type = EntityCode.Business if len(brn) == ROB_MAX_LENGTH else EntityCode.LocalCompany
        check_digit = brn[-1]
        sequence = brn[:-1]
        if entity_type != EntityCode.Business:
            sequence = sequence.lstrip("0")
        if not sequence:
            raise BRNFormatError("empty sequence number", "BRN_CLASSIC_SEQUENCE_EMPTY")
        return entity_type, sequence, check_digit

    @staticmethod
    def parse(token: Optional[str]) -> FormatClassic:
        """
        Normalitza (sense espais en blanc ni guions) i classifica el token.
        Mai llança: els errors queden a error_message / error_code.
        """
        if not token:
            return FormatClassic(raw_input=token)

        brn = re.sub(r"[\s-]", "", token)
        try:
            entity_type, sequence, check_digit = ClassicParser._classify(brn)
        except BRNFormatError as e:
            log.debug("brn_classic_invalid", extra={"brn": safe_brn(brn), "code": e.code})
            return FormatClassic(raw_input=brn, error_message=str(e), error_code=e.code)

        return FormatClassic(
            raw_input=brn,
            valid=True,
            entity_type=entity_type,
            sequence_number=sequence,
            check_digit=check_digit,
        )

    @staticmethod
    def generate(
        year: Optional[int] = None,
        entity_code: Optional[EntityCode] = None,
        rng: Optional[random.Random] = None,
    ) -> str:
        """
        Genera un BRN clàssic aleatori. L'any s'accepta però no s'usa
        (el format clàssic no té component temporal).
        """
        rng = rng or random

        if entity_code is None:
            entity_code = rng.choice([EntityCode.Business, EntityCode.LocalCompany, EntityCode.LLP])

        if entity_code == EntityCode.Business:
            if rng.randint(0, 1) == 1:
                return (
                    _random_letter(rng) + _random_letter(rng)
                    + _random_padded(rng, ROB_SEQUENCE_NUM_LENGTH - 2)
                    + _random_letter(rng)
                )
            return _random_padded(rng, ROB_SEQUENCE_NUM_LENGTH) + _random_letter(rng)

        if entity_code in EntityCode.company_codes():
            return _random_padded(rng, ROC_SEQUENCE_NUM_LENGTH) + _random_letter(rng)

        # LLP, ForeignLLP, ProfessionalLLP
        if rng.randint(0, 1) == 1:
            return "LLP" + _random_padded(rng, LLP_SEQUENCE_NUM_LENGTH) + rng.choice(LLP_SUFFIXES)

        width = rng.randint(3, 6)
        return "AF" + _random_padded(rng, width, 10 ** (width - 2) - 1)


# Singleton
classic_parser = ClassicParser()
