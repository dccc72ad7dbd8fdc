from datetime import timedelta

from geoquorum.topology import Cluster

default_replicas = 5
default_latency = timedelta(milliseconds=5)


def five_node_single_region(replicas=default_replicas, latency=default_latency) -> Cluster:
    """
    All replicas are placed in a single region, so every hop costs the intra-region latency.
    """
    return Cluster([('A', replicas)], [('A', 'A', latency)])
