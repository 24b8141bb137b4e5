"""Enumerations and small value types describing DLsite products."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

_UNKNOWN = "Unknown"


class _OpenEnum(str, Enum):
    """String enum that accepts values it does not know, as ``Unknown`` members."""

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = _UNKNOWN
        member._value_ = value
        return member

    def is_unknown(self) -> bool:
        """Whether this value is not one of the known members."""
        return self._name_ == _UNKNOWN

    def __str__(self) -> str:
        return self._value_

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class WorkTypeCategory(_OpenEnum):
    """Group of work types."""

    GAME = "game"
    COMIC = "comic"
    ILLUST = "illust"
    NOVEL = "novel"
    MOVIE = "movie"
    AUDIO = "audio"
    MUSIC = "music"
    TOOL = "tool"
    ETC = "etc"


class WorkType(_OpenEnum):
    """Individual work type."""

    # Games
    ACN = "ACN"
    QIZ = "QIZ"
    ADV = "ADV"
    RPG = "RPG"
    TBL = "TBL"
    DNV = "DNV"
    SLN = "SLN"
    TYP = "TYP"
    STG = "STG"
    PZL = "PZL"
    ETC = "ETC"
    # Manga
    MNG = "MNG"
    SCM = "SCM"
    WBT = "WBT"
    # CG and illustrations
    ICG = "ICG"
    # Novels
    NRE = "NRE"
    KSV = "KSV"
    # Video
    MOV = "MOV"
    # Voice / ASMR
    SOU = "SOU"
    # Music
    MUS = "MUS"
    # Tools and accessories
    TOL = "TOL"
    IMT = "IMT"
    AMT = "AMT"
    # Miscellaneous
    ET3 = "ET3"
    VCM = "VCM"

    def is_unknown(self) -> bool:
        """Whether this work type is not one of the known members."""
        return super().is_unknown()


class AgeCategory(IntEnum):
    """Age rating; the integer is the value used by the JSON APIs."""

    GENERAL = 1
    R15 = 2
    ADULT = 3

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class WorkCategory(_OpenEnum):
    """Parent category of a work."""

    DOUJIN = "doujin"
    BOOKS = "books"
    PC = "pc"
    APP = "app"


class FileType(_OpenEnum):
    """File type of a work."""

    EXE = "EXE"
    HTI = "HTI"
    HTE = "HTE"
    HMO = "HMO"
    IJP = "IJP"
    IGF = "IGF"
    IME = "IME"
    IBP = "IBP"
    PNG = "PNG"
    AVI = "AVI"
    MVF = "MVF"
    MPG = "MPG"
    MWM = "MWM"
    MP4 = "MP4"
    AAC = "AAC"
    WAV = "WAV"
    MP3 = "MP3"
    ADO = "ADO"
    WMA = "WMA"
    FLC = "FLC"
    OGG = "OGG"
    PDF = "PDF"
    APK = "APK"
    ET1 = "ET1"


@dataclass(frozen=True)
class Genre:
    """A genre tag."""

    name: str
    id: str