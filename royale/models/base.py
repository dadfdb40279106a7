"""Base class for RoyaleAPI response models."""

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _field_aliases(field_name: str) -> AliasChoices:
    # The API mixes camelCase and snake_case keys between endpoints
    return AliasChoices(to_camel(field_name), field_name)


class RoyaleModel(BaseModel):
    """Response model accepting camelCase or snake_case keys.

    Fields missing from a response keep their zero default; unknown keys
    are ignored.
    """

    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=_field_aliases),
        populate_by_name=True,
        extra="ignore",
    )
