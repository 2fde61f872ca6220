"""Operating modes of the simulated arm."""

from enum import IntEnum


class GameState(IntEnum):
    """The mode the simulator is in; drives how input is interpreted."""

    MANUAL = 0
    LEARNING = 1
    FINISHED_LEARNING = 2
    EXECUTE = 3
    INVERSE = 4