from typing import TYPE_CHECKING, List

from geoquorum.core import Region, Destination, InvalidQuorumSize

if TYPE_CHECKING:
    from geoquorum.topology import Cluster


def destinations(cluster: 'Cluster', leader_region: Region) -> List[Destination]:
    """
    Maps every replica of the cluster to the role it has when the leader is placed in the given region. The result
    contains exactly one leader, and one follower entry per remaining replica (so N entries in total). The leader
    region contributes one follower less, as one of its replicas is the leader itself.

    :param cluster: the cluster
    :param leader_region: the region hosting the leader
    :return: a list of destinations, the order across regions is not significant
    :raises InvalidQuorumSize: if the leader region has no replica
    """
    if cluster.replicas(leader_region) < 1:
        raise InvalidQuorumSize('leader region %s has no replica to act as leader' % (leader_region,))

    result = [Destination.leader()]

    for region in cluster.regions():
        followers = cluster.replicas(region)
        if region == leader_region:
            followers -= 1

        result.extend([Destination.follower(region)] * followers)

    return result
