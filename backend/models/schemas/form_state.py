"""Raw text currently held by each form input."""

from pydantic import BaseModel, ConfigDict


class FormState(BaseModel):
    """Session form state.

    Values are kept as the text the user typed; coercion to numbers only
    happens when a FeatureVector is built for scoring.
    """
    model_config = ConfigDict(frozen=True)

    iq: str = ""
    cgpa: str = ""
    academic: str = ""
    internship: str = ""
    comm: str = ""
    extra: str = ""
    projects: str = ""
