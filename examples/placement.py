from geoquorum.core import Destination
from geoquorum.report import all_paths, local_paths, summarize, format_duration
from geoquorum.topology import Cluster

latencies = [
    ('us-east', 'us-east', '1ms'),
    ('us-west', 'us-west', '1ms'),
    ('eu-central', 'eu-central', '1ms'),
    ('us-east', 'us-west', '35ms'),
    ('us-east', 'eu-central', '45ms'),
    ('us-west', 'eu-central', '75ms'),
]


def main():
    # compare different placements of five replicas across the same three regions
    placements = {
        '3-1-1': [('us-east', 3), ('us-west', 1), ('eu-central', 1)],
        '2-2-1': [('us-east', 2), ('us-west', 2), ('eu-central', 1)],
        '1-2-2': [('us-east', 1), ('us-west', 2), ('eu-central', 2)],
    }

    for name, regions in placements.items():
        cluster = Cluster(regions, latencies)
        print(f'placement {name}')

        for leader_region in cluster.regions():
            quorum = cluster.quorum_latency(leader_region)
            response = cluster.client_response_time(leader_region, Destination.leader(), leader_region)
            print(f'  leader in {leader_region:<10} quorum: {format_duration(quorum):>5} '
                  f'local leader read: {format_duration(response):>6}')

        summary = summarize(local_paths(all_paths(cluster)))
        print(f'  local reads: min {format_duration(summary.min)} max {format_duration(summary.max)} '
              f'mean {format_duration(summary.mean)}')


if __name__ == '__main__':
    main()
