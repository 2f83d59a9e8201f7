from typing import Dict


def init_metrics() -> Dict[str, int | float | str]:
    return {
        'algorithm': '',
        'nodes': 0,
        'visited_nodes': 0,
        'unvisited_nodes': 0,
        'connections': 0,
        'reachable_nodes': 0,
        'walk_steps': 0,
        'runtime_ms': 0.0,
    }
