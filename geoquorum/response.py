from typing import TYPE_CHECKING

from geoquorum.core import Region, Duration, Destination
from geoquorum.quorum import quorum_latency

if TYPE_CHECKING:
    from geoquorum.topology import Cluster


def client_response_time(cluster: 'Cluster', client_region: Region, destination: Destination,
                         leader_region: Region) -> Duration:
    """
    Calculates the response time a client observes when sending a request to the given destination. Every latency
    along the way is paid twice, once for the request and once for the response:

    * a request to the leader pays the client-leader round trip, plus the leader's quorum round trip
    * a request to a follower additionally pays the follower-leader round trip, as the follower has to consult the
      leader

    :param cluster: the cluster
    :param client_region: the region the client is located in
    :param destination: the replica the client talks to
    :param leader_region: the region hosting the leader
    :return: the round-trip response time
    """
    leader_quorum = quorum_latency(cluster, leader_region)

    if destination.is_leader:
        client_to_destination = cluster.latency(client_region, leader_region)
        return client_to_destination * 2 + leader_quorum * 2

    follower_region = destination.region
    client_to_destination = cluster.latency(client_region, follower_region)
    follower_to_leader = cluster.latency(follower_region, leader_region)

    return client_to_destination * 2 + follower_to_leader * 2 + leader_quorum * 2
