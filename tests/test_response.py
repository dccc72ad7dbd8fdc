import unittest
from datetime import timedelta

from geoquorum.core import Destination, MissingLatencyEdge, InvalidQuorumSize
from geoquorum.response import client_response_time
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


class ClientResponseTimeTest(unittest.TestCase):

    def setUp(self) -> None:
        self.cluster = create_cluster()

    def test_leader(self):
        self.assertEqual(ms(12), client_response_time(self.cluster, 'B', Destination.leader(), 'B'))
        self.assertEqual(ms(16), client_response_time(self.cluster, 'A', Destination.leader(), 'B'))

    def test_follower(self):
        self.assertEqual(ms(16), client_response_time(self.cluster, 'B', Destination.follower('B'), 'B'))
        self.assertEqual(ms(18), client_response_time(self.cluster, 'A', Destination.follower('A'), 'B'))

    def test_cluster_method(self):
        self.assertEqual(ms(18), self.cluster.client_response_time('A', Destination.follower('A'), 'B'))

    def test_remote_follower(self):
        # client A -> follower C (5ms), C -> leader B (6ms), quorum of B (4ms)
        self.assertEqual(ms(30), client_response_time(self.cluster, 'A', Destination.follower('C'), 'B'))

    def test_exact_arithmetic(self):
        cluster = Cluster(
            [('A', 2), ('B', 1)],
            [('A', 'A', timedelta(microseconds=333)), ('B', 'B', 1), ('A', 'B', timedelta(microseconds=1001))]
        )

        expected = timedelta(microseconds=2 * 1001 + 2 * 333)
        self.assertEqual(expected, client_response_time(cluster, 'B', Destination.leader(), 'A'))

    def test_missing_latency(self):
        cluster = Cluster(
            [('A', 2), ('B', 1), ('C', 1)],
            [('A', 'A', 1), ('B', 'B', 1), ('C', 'C', 1), ('A', 'B', 5), ('A', 'C', 5)]
        )

        with self.assertRaises(MissingLatencyEdge):
            client_response_time(cluster, 'C', Destination.follower('B'), 'A')

    def test_invalid_quorum(self):
        cluster = Cluster([('A', 1)], [('A', 'A', 1)])

        self.assertRaises(InvalidQuorumSize, client_response_time, cluster, 'A', Destination.leader(), 'A')
