from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'wall_regions_removed': 0,
        'rooms_discarded': 0,
        'rooms': 0,
        'passages_carved': 0,
        'repair_passes': 0,
        'open_cells': 0,
        'wall_cells': 0,
        'runtime_ms': 0.0,
    }
