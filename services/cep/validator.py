import re
from typing import Union

from models.correios.errors import CepValidationError

ZIPCODE_REGEX = re.compile(r"^[0-9]{5}-?[0-9]{3}$")


def validate_zipcode(zipcode: str) -> Union[str, CepValidationError]:
    """Retorna o CEP com 8 dígitos ou o erro de validação."""
    if not zipcode:
        return CepValidationError("zipcode is required")

    if not isinstance(zipcode, str) or not ZIPCODE_REGEX.fullmatch(zipcode):
        return CepValidationError("zipcode in invalid format")

    return zipcode.replace("-", "")
