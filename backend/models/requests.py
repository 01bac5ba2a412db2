from pydantic import BaseModel, Field

from models.schemas.form_state import FormState


class FieldEditRequest(BaseModel):
    field: str = Field(..., max_length=32, description="Form key of the edited input, e.g. 'cgpa'")
    raw_text: str = Field("", description="Text the user typed into the input")
    state: FormState = Field(default_factory=FormState, description="Form state before the edit")
