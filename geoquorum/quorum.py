import logging
from typing import TYPE_CHECKING

from geoquorum.core import Region, Duration, InvalidQuorumSize
from geoquorum.destinations import destinations

if TYPE_CHECKING:
    from geoquorum.topology import Cluster

logger = logging.getLogger(__name__)


def majority_minus_one(cluster_size: int) -> int:
    """
    The number of followers that need to acknowledge a write so that, together with the leader, a strict majority of
    the cluster has it.
    """
    return cluster_size // 2


def quorum_latency(cluster: 'Cluster', leader_region: Region) -> Duration:
    """
    Calculates the time it takes the leader to hear back from enough followers to form a write quorum (the "p51"
    latency). Followers are stack ranked by their latency from the leader, the quorum completes with the slowest of
    the fastest majority-minus-one followers.

    :param cluster: the cluster
    :param leader_region: the region hosting the leader
    :return: the quorum latency
    :raises InvalidQuorumSize: if the cluster has less than two replicas, or the leader region has none
    :raises MissingLatencyEdge: if the latency from the leader region to a follower region is unknown
    """
    k = majority_minus_one(cluster.size)
    if k < 1:
        raise InvalidQuorumSize('cannot form a quorum in a cluster of size %d' % cluster.size)

    latencies = sorted(cluster.latency(leader_region, destination.region)
                       for destination in destinations(cluster, leader_region)
                       if not destination.is_leader)

    if len(latencies) < k:
        raise InvalidQuorumSize('need %d followers for a quorum, have %d' % (k, len(latencies)))

    logger.debug('quorum latency with leader in %s: %s (follower %d of %d)',
                 leader_region, latencies[k - 1], k, len(latencies))

    return latencies[k - 1]
