"""Editor configuration model."""

from pydantic import BaseModel, ConfigDict, Field


class EditorConfig(BaseModel):
    """Configuration for the ignore file editor.

    Attributes:
        global_: Operate on the user-level ignore file instead of ./.gitignore
        unique: Drop duplicate patterns after every change
    """

    global_: bool = Field(False, alias="global")
    unique: bool = False

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )
