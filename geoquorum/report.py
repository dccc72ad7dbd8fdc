from datetime import timedelta
from typing import List, NamedTuple, Iterable

import numpy as np

from geoquorum.core import Region, Duration, Destination
from geoquorum.topology import Cluster
from geoquorum.util import to_duration_string


class Path(NamedTuple):
    """
    A client request: where the client is, which replica it talks to, where the leader is, and how long it takes.
    """
    client_region: Region
    destination: Destination
    leader_region: Region
    response_time: Duration


class Summary(NamedTuple):
    min: Duration
    max: Duration
    mean: Duration


def all_paths(cluster: Cluster) -> List[Path]:
    paths = list()

    # regions without replicas host clients, but never the leader
    leader_regions = [region for region in cluster.regions() if cluster.replicas(region) >= 1]

    for client_region in cluster.regions():
        for leader_region in leader_regions:
            for destination in cluster.destinations(leader_region):
                response_time = cluster.client_response_time(client_region, destination, leader_region)
                paths.append(Path(client_region, destination, leader_region, response_time))

    return paths


def unique_paths(cluster: Cluster) -> List[Path]:
    return sorted(set(all_paths(cluster)))


def leader_paths(paths: Iterable[Path]) -> List[Path]:
    """
    Requests that are always sent to the leader.
    """
    return [path for path in paths if path.destination.is_leader]


def local_paths(paths: Iterable[Path]) -> List[Path]:
    """
    Requests that are sent to a replica in the client's own region.
    """
    return [path for path in paths if path.client_region == _region_of(path)]


def _region_of(path: Path) -> Region:
    if path.destination.is_leader:
        return path.leader_region
    return path.destination.region


def summarize(paths: Iterable[Path]) -> Summary:
    micros = np.array([path.response_time // timedelta(microseconds=1) for path in paths], dtype=np.int64)

    if micros.size == 0:
        raise ValueError('cannot summarize an empty set of paths')

    # integer division, the mean is truncated to whole microseconds
    mean = int(micros.sum()) // micros.size

    return Summary(
        min=timedelta(microseconds=int(micros.min())),
        max=timedelta(microseconds=int(micros.max())),
        mean=timedelta(microseconds=mean)
    )


def round_duration_ms(duration: Duration) -> Duration:
    """
    Truncates the duration to whole milliseconds.
    """
    return timedelta(milliseconds=duration // timedelta(milliseconds=1))


def format_duration(duration: Duration) -> str:
    return to_duration_string(round_duration_ms(duration))


def render_paths(paths: Iterable[Path]) -> List[str]:
    lines = [
        'Client Region | Destination | Leader Region | Response Time |',
        '------------- | ----------- | ------------- | ------------- |',
    ]
    for path in paths:
        lines.append(f'{path.client_region} | {path.destination} | {path.leader_region} | '
                     f'{format_duration(path.response_time)}')
    return lines


def render_strategies(paths: List[Path]) -> List[str]:
    lines = [
        'Strategy | Min Response Time | Max Response Time | Mean Response Time',
        '-------- | ----------------- | ----------------- | ------------------',
    ]

    strategies = [
        ('Leader', leader_paths(paths)),
        ('Local', local_paths(paths)),
        ('Global', paths),
    ]

    for strategy, selected in strategies:
        summary = summarize(selected)
        lines.append(f'{strategy} | {format_duration(summary.min)} | {format_duration(summary.max)} | '
                     f'{format_duration(summary.mean)}')

    return lines


def render_report(title: str, cluster: Cluster) -> str:
    """
    Renders a markdown section listing the response time of every distinct request path, followed by the min, max
    and mean response time of each routing strategy (always the leader, a replica in the client's region, or any
    replica).
    """
    paths = all_paths(cluster)

    lines = [f'## {title}']
    lines.extend(render_paths(sorted(set(paths))))
    lines.append('')
    lines.extend(render_strategies(paths))
    lines.append('')

    return '\n'.join(lines) + '\n'
