import unittest
from datetime import timedelta

from geoquorum.core import MissingLatencyEdge, LatencyEdge
from geoquorum.topology import Cluster


def ms(value) -> timedelta:
    return timedelta(milliseconds=value)


def create_cluster() -> Cluster:
    return Cluster(
        [('A', 2), ('B', 2), ('C', 1)],
        [
            ('A', 'A', ms(1)),
            ('B', 'B', ms(2)),
            ('C', 'C', ms(3)),
            ('A', 'B', ms(4)),
            ('A', 'C', ms(5)),
            ('B', 'C', ms(6)),
        ]
    )


class ClusterTest(unittest.TestCase):

    def setUp(self) -> None:
        self.cluster = create_cluster()

    def test_replicas(self):
        self.assertEqual(2, self.cluster.replicas('A'))
        self.assertEqual(2, self.cluster.replicas('B'))
        self.assertEqual(1, self.cluster.replicas('C'))
        self.assertEqual(0, self.cluster.replicas('D'))
        self.assertEqual(5, self.cluster.size)

    def test_regions(self):
        self.assertEqual(['A', 'B', 'C'], sorted(self.cluster.regions()))

    def test_latency(self):
        self.assertEqual(ms(1), self.cluster.latency('A', 'A'))
        self.assertEqual(ms(2), self.cluster.latency('B', 'B'))
        self.assertEqual(ms(3), self.cluster.latency('C', 'C'))
        self.assertEqual(ms(4), self.cluster.latency('A', 'B'))
        self.assertEqual(ms(5), self.cluster.latency('A', 'C'))
        self.assertEqual(ms(6), self.cluster.latency('B', 'C'))

    def test_latency_is_symmetric(self):
        for a in self.cluster.regions():
            for b in self.cluster.regions():
                self.assertEqual(self.cluster.latency(a, b), self.cluster.latency(b, a))

    def test_missing_latency(self):
        cluster = Cluster([('A', 1), ('B', 1)], [('A', 'A', 1), ('B', 'B', 1)])

        with self.assertRaises(MissingLatencyEdge) as ctx:
            cluster.latency('A', 'B')

        self.assertEqual('A', ctx.exception.region_a)
        self.assertEqual('B', ctx.exception.region_b)
        self.assertRaises(MissingLatencyEdge, cluster.latency, 'B', 'A')
        self.assertRaises(MissingLatencyEdge, cluster.latency, 'A', 'X')

    def test_latency_values(self):
        cluster = Cluster([('A', 1), ('B', 2)], [('A', 'A', 1), ('B', 'B', '2ms'), ('A', 'B', 2.5)])

        self.assertEqual(ms(1), cluster.latency('A', 'A'))
        self.assertEqual(ms(2), cluster.latency('B', 'B'))
        self.assertEqual(timedelta(microseconds=2500), cluster.latency('B', 'A'))

    def test_repeated_region_last_write_wins(self):
        cluster = Cluster([('A', 1), ('A', 3)], [('A', 'A', 1)])

        self.assertEqual(3, cluster.replicas('A'))
        self.assertEqual(3, cluster.size)
        self.assertEqual(['A'], cluster.regions())

    def test_repeated_edge_last_write_wins(self):
        cluster = Cluster([('A', 1), ('B', 1)], [('A', 'B', 10), ('B', 'A', 20)])

        self.assertEqual(ms(20), cluster.latency('A', 'B'))

    def test_edge_endpoints_are_not_regions(self):
        cluster = Cluster([('A', 1)], [('A', 'A', 1), ('A', 'B', 10)])

        self.assertEqual(['A'], cluster.regions())
        self.assertEqual(ms(10), cluster.latency('B', 'A'))

    def test_negative_values_rejected(self):
        self.assertRaises(ValueError, Cluster, [('A', -1)], [])
        self.assertRaises(ValueError, Cluster, [('A', 1)], [('A', 'A', -1)])

    def test_edges(self):
        edges = self.cluster.edges()

        self.assertEqual(6, len(edges))
        self.assertIn(LatencyEdge('A', 'B', ms(4)), edges)
        self.assertIn(LatencyEdge('C', 'C', ms(3)), edges)

    def test_cluster_is_immutable(self):
        self.assertRaises(Exception, self.cluster.graph.add_node, 'D')
        self.assertRaises(Exception, self.cluster.graph.add_edge, 'A', 'D')

    def test_repr(self):
        self.assertEqual('Cluster(A=2, B=2, C=1)', repr(self.cluster))
