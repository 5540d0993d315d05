"""
Classic Conway's Game of Life Rules

The fixed B3/S23 rule: a live cell survives with 2 or 3 live neighbors,
a dead cell is born with exactly 3. There are no rule variants.
"""

from typing import Dict, FrozenSet, Tuple


SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        # Survival rule
        return live_neighbors in SURVIVAL_SET
    else:
        # Birth rule
        return live_neighbors in BIRTH_SET


def rule_table() -> Dict[Tuple[bool, int], bool]:
    """Get the complete rule table.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    return {
        (alive, neighbors): update_cell(alive, neighbors)
        for alive in (False, True)
        for neighbors in range(9)
    }
