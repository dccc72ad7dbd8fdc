import logging
from typing import Iterable, List, Tuple, Union

import networkx as nx

from geoquorum.core import Region, Duration, Destination, LatencyEdge, MissingLatencyEdge
from geoquorum.destinations import destinations
from geoquorum.quorum import quorum_latency
from geoquorum.response import client_response_time
from geoquorum.util import to_duration

logger = logging.getLogger(__name__)


class Cluster:
    """
    A quorum-replicated cluster spread over network regions. The cluster knows how many replicas each region hosts
    and the one-way latency between every pair of regions (including a region and itself, i.e., the intra-region
    latency).

    The regions and latencies are kept in an undirected networkx graph: regions are nodes with a ``replicas``
    attribute, latencies are edges (or self-loops) with a ``latency`` attribute. The graph is frozen once the cluster
    is created, a cluster never changes afterwards.
    """

    def __init__(self, regions: Iterable[Tuple[Region, int]],
                 edges: Iterable[Tuple[Region, Region, Union[Duration, float, str]]]) -> None:
        """
        Creates a new cluster. For example:

        Cluster([('A', 2), ('B', 1)], [('A', 'A', '1ms'), ('B', 'B', '2ms'), ('A', 'B', '20ms')])

        Missing latencies are not detected here, but when they are first queried.

        :param regions: pairs of region and the number of replicas in that region (a repeated region overwrites the
        previous count)
        :param edges: triples of two regions and the latency between them, either as timedelta, milliseconds, or
        duration string (see `geoquorum.util.parse_duration_string`)
        """
        graph = nx.Graph()

        for region, count in regions:
            if count < 0:
                raise ValueError('region %s cannot have %d replicas' % (region, count))
            graph.add_node(region, replicas=int(count))

        for source, target, latency in edges:
            graph.add_edge(source, target, latency=to_duration(latency))

        self._graph = nx.freeze(graph)

        logger.debug('created cluster with %d replicas in %d regions and %d latency edges',
                     self.size, len(self.regions()), graph.number_of_edges())

    @property
    def graph(self) -> nx.Graph:
        """
        The frozen latency graph backing this cluster.
        """
        return self._graph

    @property
    def size(self) -> int:
        return sum(self.replicas(region) for region in self.regions())

    def regions(self) -> List[Region]:
        return [region for region, replicas in self._graph.nodes(data='replicas') if replicas is not None]

    def replicas(self, region: Region) -> int:
        if region not in self._graph:
            return 0
        return self._graph.nodes[region].get('replicas', 0)

    def latency(self, source: Region, target: Region) -> Duration:
        """
        Returns the one-way latency between the two regions, which is the same in both directions.

        :raises MissingLatencyEdge: if no latency between the two regions was given
        """
        try:
            return self._graph.edges[source, target]['latency']
        except KeyError:
            raise MissingLatencyEdge(source, target) from None

    def edges(self) -> List[LatencyEdge]:
        return [LatencyEdge(source, target, latency) for source, target, latency in self._graph.edges(data='latency')]

    def destinations(self, leader_region: Region) -> List[Destination]:
        return destinations(self, leader_region)

    def quorum_latency(self, leader_region: Region) -> Duration:
        return quorum_latency(self, leader_region)

    def client_response_time(self, client_region: Region, destination: Destination,
                             leader_region: Region) -> Duration:
        return client_response_time(self, client_region, destination, leader_region)

    def __repr__(self):
        regions = ', '.join(f'{region}={self.replicas(region)}' for region in self.regions())
        return f'Cluster({regions})'
