import logging
from typing import TypeGuard

from pyproj import CRS as ProjCRS
from pyproj.exceptions import CRSError as ProjCRSError

from geotypes.core.errors import CRSError
from geotypes.enums.crs_type import CRSType
from geotypes.schemas.crs import CRS, LinkedCRS, LinkedCRSProperties, NamedCRS, NamedCRSProperties

logger = logging.getLogger(__name__)


def is_named_crs(crs: CRS) -> TypeGuard[NamedCRS]:
    return crs.type == CRSType.NAME

def is_linked_crs(crs: CRS) -> TypeGuard[LinkedCRS]:
    return crs.type == CRSType.LINK


def create_named_crs(name: str) -> NamedCRS:
    return NamedCRS(properties=NamedCRSProperties(name=name))

def create_linked_crs(href: str, type: str | None = None) -> LinkedCRS:
    return LinkedCRS(properties=LinkedCRSProperties(href=href, type=type or None))


def resolve_crs(crs: CRS) -> ProjCRS:
    """pyproj CRS for a named CRS (EPSG code, OGC URN, WKT...)."""
    if is_linked_crs(crs):
        raise CRSError(f'Linked CRS cannot be resolved offline: {crs.properties.href}')
    try:
        return ProjCRS.from_user_input(crs.properties.name)
    except ProjCRSError as e:
        raise CRSError(f'Unknown CRS name: {crs.properties.name}') from e


def crs_to_epsg(crs: CRS) -> int | None:
    epsg = resolve_crs(crs).to_epsg()
    if epsg is None:
        logger.debug('No EPSG code matches %s', crs.properties.name)
    return epsg
