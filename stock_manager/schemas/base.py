from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimals stay exact in Python and go out as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

Price = Annotated[Money, Field(ge=0, max_digits=10, decimal_places=2)]
Quantity = Annotated[Money, Field(gt=0, max_digits=10, decimal_places=2)]


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class NamedRef(CamelModel):
    id: int
    name: str


class MessageResponse(BaseModel):
    message: str
