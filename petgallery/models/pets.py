from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_BREED = "Unknown Breed"


class AnimalType(str, Enum):
    """Top-level category selecting which API namespace is queried."""

    CAT = "cat"
    DOG = "dog"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()}s"


class Breed(BaseModel):
    """A named sub-category of an animal type.

    Descriptive fields returned by the API (temperament, origin, life_span,
    weight, ...) are kept verbatim as extra attributes.
    """

    id: str
    name: str

    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)


class AnimalImage(BaseModel):
    id: str
    url: str
    breeds: list[Breed] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)

    @property
    def breed_name(self) -> str:
        return self.breeds[0].name if self.breeds else UNKNOWN_BREED

    def alt_text(self, animal_type: AnimalType) -> str:
        return f"{AnimalType(animal_type).value} - {self.breed_name}"
