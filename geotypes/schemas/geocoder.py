from pydantic import BaseModel, ConfigDict, Field


class NamedPlace(BaseModel):
    name: str

class Regeocode(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    formatted_address: str = Field('', alias='formattedAddress')
    aois: list[NamedPlace] = Field(default_factory=list)
    pois: list[NamedPlace] = Field(default_factory=list)
    roads: list[NamedPlace] = Field(default_factory=list)

class ReverseGeocodeResult(BaseModel):
    regeocode: Regeocode | None = None
