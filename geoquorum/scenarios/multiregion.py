from datetime import timedelta

from geoquorum.topology import Cluster

default_replicas_per_region = 3
default_intra_region_latency = timedelta(milliseconds=5)
default_near_latency = timedelta(milliseconds=20)
default_far_latency = timedelta(milliseconds=60)


def nine_node_multi_region(replicas_per_region=default_replicas_per_region,
                           intra_region_latency=default_intra_region_latency,
                           near_latency=default_near_latency,
                           far_latency=default_far_latency) -> Cluster:
    """
    Three regions A, B and C with the same number of replicas each. B and C are close to each other, A is far away
    from both.

    :param replicas_per_region: the number of replicas in each region
    :param intra_region_latency: the latency between two replicas of the same region
    :param near_latency: the latency between B and C
    :param far_latency: the latency between A and the other two regions
    """
    regions = ['A', 'B', 'C']

    return Cluster(
        [(region, replicas_per_region) for region in regions],
        [(region, region, intra_region_latency) for region in regions] + [
            ('B', 'C', near_latency),
            ('A', 'B', far_latency),
            ('C', 'A', far_latency),
        ]
    )
