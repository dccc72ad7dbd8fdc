from geoquorum.scenarios.multiregion import nine_node_multi_region
from geoquorum.scenarios.singleregion import five_node_single_region

name = 'scenarios'

scenarios = {
    'five-node-single-region': five_node_single_region,
    'nine-node-multi-region': nine_node_multi_region,
}

titles = {
    'five-node-single-region': 'Five Node Single Region',
    'nine-node-multi-region': 'Nine Node Multi Region',
}

__all__ = [
    'five_node_single_region',
    'nine_node_multi_region',
    'scenarios',
    'titles',
]
