"""Catalogue of the seven prediction form inputs.

Listed in display order. Model (coefficient) order is FEATURE_COLUMNS;
the two differ in that Communication Skills is shown before
Extra-curricular Activities.
"""

from models.schemas.field_spec import FieldSpec
from services.errors import UnknownFieldError

FIELDS: list[FieldSpec] = [
    FieldSpec(
        key="iq",
        column="IQ",
        label="IQ Score",
        description="Intelligence Quotient (0-200)",
        min=0,
        max=200,
        kind="float",
    ),
    FieldSpec(
        key="cgpa",
        column="CGPA",
        label="CGPA",
        description="Cumulative Grade Point Average (0-10)",
        min=0,
        max=10,
        step=0.1,
        kind="float",
    ),
    FieldSpec(
        key="academic",
        column="Academic_Performance",
        label="Academic Performance",
        description="Academic performance rating (1-10)",
        min=1,
        max=10,
    ),
    FieldSpec(
        key="internship",
        column="Internship_Experience",
        label="Internship Experience",
        description="Internship experience (0=No, 1=Yes)",
        min=0,
        max=1,
    ),
    FieldSpec(
        key="comm",
        column="Communication_Skills",
        label="Communication Skills",
        description="Communication skills rating (1-10)",
        min=1,
        max=10,
    ),
    FieldSpec(
        key="extra",
        column="Extra_Curricular_Score",
        label="Extra-curricular Activities",
        description="Extra-curricular activities rating (1-10)",
        min=1,
        max=10,
    ),
    FieldSpec(
        key="projects",
        column="Projects_Completed",
        label="Number of Projects",
        description="Number of technical projects (0 or more)",
        min=0,
        max=50,
    ),
]

_BY_KEY: dict[str, FieldSpec] = {spec.key: spec for spec in FIELDS}


def get_field(key: str) -> FieldSpec:
    try:
        return _BY_KEY[key]
    except KeyError:
        raise UnknownFieldError(key) from None
