"""Interpretation of the feed's overloaded ``Error`` field.

The same element carries either one of a handful of numeric failure codes or
free informational text. Only the codes in ApiErrorCode are treated as
failures; anything else, numeric-looking or not, is passed through.
"""

import logging

from octranspo_api.domain.errors import ApiError, ApiErrorCode

logger = logging.getLogger(__name__)

_KNOWN_CODES = {code.value: code for code in ApiErrorCode}


def check_error_code(error_text: str) -> str:
    """Return the informational text, or raise if it is a known error code.

    Args:
        error_text: Text of an ``Error`` element, possibly empty.

    Returns:
        ``error_text`` unchanged when it is not a known failure code.

    Raises:
        ApiError: If the text is one of the known failure codes.
    """
    code = _KNOWN_CODES.get(error_text)
    if code is None:
        return error_text

    logger.debug(f"API reported error code {code.value}: {code.description}")
    raise ApiError(code)
