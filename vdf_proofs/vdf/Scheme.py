from enum import Enum


class Scheme(Enum):
    """Proof schemes selectable at the boundary."""

    WESOLOWSKI = "wesolowski"
    PIETRZAK = "pietrzak"

    @classmethod
    def from_flag(cls, is_pietrzak: bool) -> "Scheme":
        return cls.PIETRZAK if is_pietrzak else cls.WESOLOWSKI
