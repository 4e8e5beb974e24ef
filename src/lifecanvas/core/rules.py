"""
Conway's Game of Life Rules

The B3/S23 transition: a live cell survives with two or three live
neighbors, a dead cell is born with exactly three, everything else is dead
in the next generation.
"""

from typing import Dict, Set, Tuple


SURVIVAL_SET: Set[int] = {2, 3}
BIRTH_SET: Set[int] = {3}


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Next state of one cell given its live neighbor count.

    Neighbor counts are for the bounded board, so a cell on the edge never
    sees more than five and a corner never more than three.
    """
    allowed = SURVIVAL_SET if alive else BIRTH_SET
    return live_neighbors in allowed


def get_rule_table() -> Dict[Tuple[bool, int], bool]:
    """Get the complete transition table.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
        for every neighbor count from 0 to 8
    """
    rules = {}

    for current_state in [False, True]:
        for neighbors in range(9):
            rules[(current_state, neighbors)] = update_cell(current_state, neighbors)

    return rules
