from __future__ import annotations
from enum import Enum, IntEnum
from pydantic import BaseModel

class Category(IntEnum):
    """Traversal strength of a cursor; higher values promise more."""
    INPUT = 0
    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3

class Tier(str, Enum):
    RANDOM_ACCESS = "random-access"   # a: sized + O(1) offset, pass-through
    SIZED = "sized"                   # b: clamp to size()
    DISTANCE = "distance"             # c: clamp to end - begin
    LAZY = "lazy"                     # d: unclamped, EndSentinel

class Capabilities(BaseModel):
    model_config = {"frozen": True}

    source: str
    cursor: str
    category: Category
    counted_category: Category
    single_pass: bool
    sized: bool
    random_access: bool
    sized_sentinel: bool
    tier: Tier

    @property
    def counted(self) -> bool:
        """Whether begin() wraps the source cursor in a CountedCursor."""
        return self.tier is not Tier.RANDOM_ACCESS
