import pydantic


class BaseModel(pydantic.BaseModel):
    """
    Common base for all framebridge message models.

    Unknown fields are rejected so that a misspelled field name in a message
    dictionary fails loudly instead of silently producing a default value.
    """

    model_config = pydantic.ConfigDict(extra="forbid")
