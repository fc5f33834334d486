from typing import Annotated, Literal
from pydantic import BaseModel, ConfigDict, Field

from geotypes.core.constants import BEIJING54_EPSG, CGCS2000_EPSG, WEB_MERCATOR_EPSG, WGS84_EPSG, XIAN80_EPSG


class NamedCRSProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

class LinkedCRSProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str
    type: str | None = Field(None, description="Format of the linked definition, e.g. 'proj4' or 'ogcwkt'")


class NamedCRS(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["name"] = "name"
    properties: NamedCRSProperties

class LinkedCRS(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["link"] = "link"
    properties: LinkedCRSProperties

CRS = Annotated[NamedCRS | LinkedCRS, Field(discriminator='type')]


def _named(epsg: int) -> NamedCRS:
    return NamedCRS(properties=NamedCRSProperties(name=f'EPSG:{epsg}'))


class CommonCRS:
    WGS84 = _named(WGS84_EPSG)
    WEB_MERCATOR = _named(WEB_MERCATOR_EPSG)
    CGCS2000 = _named(CGCS2000_EPSG)  # China Geodetic Coordinate System 2000
    BEIJING54 = _named(BEIJING54_EPSG)
    XIAN80 = _named(XIAN80_EPSG)
