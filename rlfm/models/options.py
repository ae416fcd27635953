from dataclasses import dataclass
from enum import Enum

from ..constants.constants import CHECKPOINT_STRIDE, CONSTRUCTION, CONSTRUCTIONS
from ..errors import ConfigError
from .units import Segmentation


class EmptyInputPolicy(Enum):
    DEGENERATE = "degenerate"   # empty index, only the empty pattern matches
    REJECT = "reject"           # raise EmptyInputError


@dataclass(frozen=True)
class BuildOptions:
    # unit definition shared by build and every search on the index
    segmentation:       Segmentation = Segmentation.SCALAR
    # spacing of the rank checkpoints
    checkpointStride:   int = CHECKPOINT_STRIDE
    # rotation sort strategy, see constants.CONSTRUCTIONS
    construction:       str = CONSTRUCTION
    emptyInput:         EmptyInputPolicy = EmptyInputPolicy.DEGENERATE

    def __post_init__(self):
        if not isinstance(self.segmentation, Segmentation):
            raise ConfigError(f"unknown segmentation: {self.segmentation!r}")
        if not isinstance(self.checkpointStride, int) or self.checkpointStride < 1:
            raise ConfigError(f"checkpoint stride must be a positive integer, got {self.checkpointStride!r}")
        if self.construction not in CONSTRUCTIONS:
            raise ConfigError(
                f"unknown construction {self.construction!r}, expected one of {', '.join(CONSTRUCTIONS)}"
            )
        if not isinstance(self.emptyInput, EmptyInputPolicy):
            raise ConfigError(f"unknown empty input policy: {self.emptyInput!r}")
