from enum import StrEnum


class CRSType(StrEnum):
    NAME = 'name'
    LINK = 'link'
