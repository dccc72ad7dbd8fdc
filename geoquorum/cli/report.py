import argparse
import logging
import os
import sys
from typing import List, Tuple
from xml.etree.ElementTree import ParseError

import networkx as nx

from geoquorum.core import MissingLatencyEdge, InvalidQuorumSize
from geoquorum.graph import load_cluster
from geoquorum.report import render_report
from geoquorum.scenarios import scenarios, titles
from geoquorum.topology import Cluster
from geoquorum.util import parse_duration_string

logger = logging.getLogger(__name__)


def parse_region(spec: str) -> Tuple[str, int]:
    """
    Parses region arguments like 'A=3'.
    """
    region, sep, count = spec.partition('=')
    if not sep or not region or not count.isdigit():
        raise ValueError('invalid region %r, expected REGION=REPLICAS' % spec)
    return region, int(count)


def parse_edge(spec: str) -> Tuple[str, str, object]:
    """
    Parses edge arguments like 'A:B=20ms' (or 'A:A=1ms' for intra-region latency).
    """
    pair, sep, latency = spec.partition('=')
    source, colon, target = pair.partition(':')
    if not sep or not colon or not source or not target:
        raise ValueError('invalid edge %r, expected REGION:REGION=LATENCY' % spec)
    return source, target, parse_duration_string(latency)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='geoquorum-report',
        description='Estimate quorum and client response times of a cluster replicated across regions.')
    parser.add_argument('--scenario', action='append', default=[], choices=sorted(scenarios.keys()),
                        help='built-in topology to report on (can be repeated)')
    parser.add_argument('--graph', action='append', default=[],
                        help='graphml file with regions (replicas attribute) and latency edges (can be repeated)')
    parser.add_argument('--region', action='append', default=[], metavar='REGION=REPLICAS',
                        help='region of a topology given on the command line (can be repeated)')
    parser.add_argument('--edge', action='append', default=[], metavar='REGION:REGION=LATENCY',
                        help='latency between two regions, e.g., A:B=20ms (can be repeated)')
    parser.add_argument('--title', default='Custom Topology',
                        help='title of the topology given with --region and --edge')
    parser.add_argument('--output', help='write the report to this file instead of stdout')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    return parser


def select_clusters(args) -> List[Tuple[str, Cluster]]:
    clusters = list()

    for name in args.scenario:
        clusters.append((titles[name], scenarios[name]()))

    for path in args.graph:
        title = os.path.splitext(os.path.basename(path))[0]
        clusters.append((title, load_cluster(path)))

    if args.region or args.edge:
        regions = [parse_region(spec) for spec in args.region]
        edges = [parse_edge(spec) for spec in args.edge]
        clusters.append((args.title, Cluster(regions, edges)))

    if not clusters:
        clusters = [(titles[name], factory()) for name, factory in scenarios.items()]

    return clusters


def main(argv=None) -> int:
    args = create_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s %(levelname)-8s %(name)s: %(message)s')

    try:
        report = ''.join(render_report(title, cluster) for title, cluster in select_clusters(args))
    except (MissingLatencyEdge, InvalidQuorumSize, ValueError, OverflowError, OSError, nx.NetworkXError,
            ParseError) as e:
        logger.debug('invalid topology', exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, 'w') as fd:
            fd.write(report)
        print('saved', args.output)
    else:
        sys.stdout.write(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
