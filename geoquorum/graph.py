import logging
from typing import Iterable

import networkx as nx

from geoquorum.core import LatencyEdge
from geoquorum.topology import Cluster
from geoquorum.util import to_duration, to_millis

logger = logging.getLogger(__name__)


def add_edges(graph: nx.Graph, edges: Iterable[LatencyEdge], node_prefix=''):
    """
    Adds latency edges to a graph. Latencies are stored in milliseconds, so the graph can be written as graphml.
    Regions keep their key unless a node prefix is given.
    """
    for e in edges:
        src = f'{node_prefix}{e.source}' if node_prefix else e.source
        dst = f'{node_prefix}{e.target}' if node_prefix else e.target

        graph.add_edge(src, dst, latency=to_millis(to_duration(e.latency)))


def cluster_to_graph(cluster: Cluster) -> nx.Graph:
    graph = nx.Graph()

    for region in cluster.regions():
        graph.add_node(region, replicas=cluster.replicas(region))

    add_edges(graph, cluster.edges())

    return graph


def cluster_from_graph(graph: nx.Graph) -> Cluster:
    """
    Creates a cluster from a graph where region nodes have a ``replicas`` attribute, and edges have a ``latency``
    attribute in milliseconds. Nodes without ``replicas`` are not regions, but their edges are kept.
    """
    regions = [(node, replicas) for node, replicas in graph.nodes(data='replicas') if replicas is not None]

    edges = list()
    for src, dst, latency in graph.edges(data='latency'):
        if latency is None:
            logger.debug('skipping edge %s - %s without latency', src, dst)
            continue
        edges.append(LatencyEdge(src, dst, latency))

    return Cluster(regions, edges)


def save_cluster(cluster: Cluster, path: str) -> None:
    save_graph(cluster_to_graph(cluster), path)
    logger.debug('saved %s to %s', cluster, path)


def load_cluster(path: str) -> Cluster:
    """
    Loads a cluster from a graphml file, e.g., one written by `save_cluster`.

    raises FileNotFoundError
    """
    logger.debug('loading cluster from %s', path)
    return cluster_from_graph(load_graph(path))


def save_graph(g: nx.Graph, path: str) -> None:
    nx.write_graphml(g, path=path)


def load_graph(path: str) -> nx.Graph:
    return nx.read_graphml(path)
