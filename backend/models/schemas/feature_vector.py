"""Model input: the seven student features in coefficient order."""

from pydantic import BaseModel, ConfigDict, Field

# Column order the coefficients were fitted on. Must not be reordered.
FEATURE_COLUMNS = [
    "IQ",
    "CGPA",
    "Academic_Performance",
    "Internship_Experience",
    "Extra_Curricular_Score",
    "Communication_Skills",
    "Projects_Completed",
]


class FeatureVector(BaseModel):
    """Immutable, order-significant feature tuple.

    Built fresh from the form on every submission. Accepts either the
    attribute names or the model column names (``IQ``, ``CGPA``, ...).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    iq: float = Field(0.0, alias="IQ")
    cgpa: float = Field(0.0, alias="CGPA")
    academic_performance: int = Field(0, alias="Academic_Performance")
    internship_experience: int = Field(0, alias="Internship_Experience")
    extra_curricular_score: int = Field(0, alias="Extra_Curricular_Score")
    communication_skills: int = Field(0, alias="Communication_Skills")
    projects_completed: int = Field(0, alias="Projects_Completed")

    def as_list(self) -> list[float]:
        """Values in FEATURE_COLUMNS order."""
        by_column = self.model_dump(by_alias=True)
        return [float(by_column[name]) for name in FEATURE_COLUMNS]
