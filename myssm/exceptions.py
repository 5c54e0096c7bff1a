"""
Excepcions del parser BRN.

Només es llancen en mode estricte (BRN.parse(strict=True), BRN.make(strict=True))
o per peticions impossibles. Els errors semàntics d'un format (any futur,
codi d'entitat desconegut) es guarden al resultat del format, no es propaguen.
"""
from typing import Optional


class BRNError(Exception):
    """Base de totes les excepcions BRN."""


class ParseError(BRNError):
    """Error inesperat durant el parseig dels dos formats."""


class InvalidFormatError(BRNError):
    """Cap dels dos formats (2019, clàssic) és vàlid."""


class UnknownFormatError(BRNError):
    """S'ha demanat un format amb un nom desconegut."""


class GenerateError(BRNError):
    """No es pot generar un BRN amb els paràmetres donats."""


class BRNFormatError(BRNError):
    """
    Error semàntic dins d'un format concret.

    El llança el parser i el captura ell mateix: el missatge i el codi
    acaben a error_message / error_code del resultat.
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code
