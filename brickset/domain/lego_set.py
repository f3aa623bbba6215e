"""Domain entities for LEGO sets."""

from enum import Enum
from typing import Annotated, Optional, Tuple

from pydantic import ConfigDict, Field
from pydantic.dataclasses import dataclass


class PackagingType(str, Enum):
    """How a set is packaged, as spelled in the dataset."""

    BOX = "Box"
    BOX_WITH_BACKING_CARD = "Box with backing card"
    BLISTER_PACK = "Blister pack"
    BUCKET = "Bucket"
    CANISTER = "Canister"
    FOIL_PACK = "Foil pack"
    PLASTIC_BOX = "Plastic box"
    POLYBAG = "Polybag"
    SHRINK_WRAPPED = "Shrink-wrapped"
    TUB = "Tub"
    ZIP_LOCK_BAG = "Zip-lock bag"
    OTHER = "Other"
    NONE = "None"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, config=ConfigDict(strict=True))
class LegoSet:
    """Immutable LEGO set entity.

    ``subtheme`` and ``tags`` may be None; a None ``tags`` means the set
    has no tag information at all, which is not the same as an empty tuple.
    """

    number: Annotated[str, Field(min_length=1)]
    name: Annotated[str, Field(min_length=1)]
    theme: str
    pieces: Annotated[int, Field(ge=0)]
    packaging: PackagingType
    subtheme: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None
    year: Optional[int] = None
