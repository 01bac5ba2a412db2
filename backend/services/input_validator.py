"""Input gating for the prediction form.

Three concerns live here:
    - validate_edit / apply_edit: accept or silently reject a single edit
      against the field's [min, max] range
    - is_ready / missing_fields: the submit precondition (every input
      non-empty; ranges are not re-checked)
    - to_feature_vector: coerce the form text into model input
"""

import logging
import math
import re

from models.schemas.feature_vector import FeatureVector
from models.schemas.form_state import FormState
from services.errors import IncompleteInputError
from services.fields import FIELDS, get_field

logger = logging.getLogger(__name__)

# Leading integer as JS parseInt reads it: optional sign, then hex (0x..) or decimal digits
_INT_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))", re.ASCII)

# Longer digit runs do not fit a float64; treated like non-finite input
_MAX_DECIMAL_DIGITS = 308
_MAX_HEX_DIGITS = 255


def _parse_number(raw_text: str) -> float | None:
    """Parse form text as a float, or None if it is not numeric."""
    text = raw_text.strip()
    # float() accepts digit separators; an <input type=number> never does
    if not text or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_int_prefix(raw_text: str) -> int | None:
    """Integer from the leading digits of the text, or None if there are none.

    Parsing stops at the first character that is not a digit, so "5e1" is 5
    and "8.7" is 8.
    """
    match = _INT_PREFIX.match(raw_text)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    if (
        len((hex_digits or "").lstrip("0")) > _MAX_HEX_DIGITS
        or len((digits or "").lstrip("0")) > _MAX_DECIMAL_DIGITS
    ):
        return None
    value = int(hex_digits, 16) if hex_digits else int(digits)
    return -value if sign == "-" else value


def validate_edit(field: str, raw_text: str) -> tuple[bool, str]:
    """Decide whether an edit may enter the form state.

    Returns (accepted, raw_text). Accepted text is kept verbatim, e.g.
    "08.50" stays "08.50". Raises UnknownFieldError for undeclared keys.
    """
    spec = get_field(field)

    # Clearing an input is always allowed
    if raw_text == "":
        return True, raw_text

    value = _parse_number(raw_text)
    if value is None:
        logger.debug("Rejected non-numeric edit for %s: %r", field, raw_text)
        return False, raw_text

    # NaN fails both comparisons and is rejected here
    if spec.min <= value <= spec.max:
        return True, raw_text

    logger.debug(
        "Rejected out-of-range edit for %s: %s not in [%s, %s]",
        field, raw_text, spec.min, spec.max,
    )
    return False, raw_text


def apply_edit(state: FormState, field: str, raw_text: str) -> tuple[bool, FormState]:
    """Apply an edit to the form state if it validates.

    Returns the updated copy when accepted and the untouched state otherwise.
    """
    accepted, value = validate_edit(field, raw_text)
    if not accepted:
        return False, state
    return True, state.model_copy(update={field: value})


def missing_fields(state: FormState) -> list[str]:
    return [spec.key for spec in FIELDS if getattr(state, spec.key) == ""]


def is_ready(state: FormState) -> bool:
    """True when every input holds a non-empty string."""
    return not missing_fields(state)


def to_feature_vector(state: FormState, strict: bool = False) -> FeatureVector:
    """Coerce form text into a FeatureVector.

    Float fields parse as floats. Integer fields take the leading integer
    ("8.7" -> 8, "5e1" -> 5). Empty, non-numeric or non-finite text scores
    as 0 unless strict is set, in which case IncompleteInputError lists
    those fields.
    """
    values: dict[str, float | int] = {}
    unparsable: list[str] = []

    for spec in FIELDS:
        text = getattr(state, spec.key)
        number: float | int | None
        if spec.kind == "int":
            number = _parse_int_prefix(text)
        else:
            number = _parse_number(text)
            if number is not None and not math.isfinite(number):
                number = None
        if number is None:
            unparsable.append(spec.key)
            number = 0 if spec.kind == "int" else 0.0
        values[spec.column] = number

    if unparsable:
        if strict:
            raise IncompleteInputError(unparsable)
        logger.info("Scoring unparsable inputs as 0: %s", ", ".join(unparsable))

    return FeatureVector(**values)
