import enum
from collections import namedtuple
from datetime import timedelta
from typing import Hashable, NamedTuple, Optional

Region = Hashable
"""
A region is a network partition of the cluster (e.g., a cloud region or data center). Any small hashable and
comparable key works, in practice regions are strings.
"""

Duration = timedelta


class MissingLatencyEdge(LookupError):
    """
    Raised when the latency between two regions is queried but was never supplied (in either order).
    """

    def __init__(self, region_a: Region, region_b: Region) -> None:
        super().__init__(region_a, region_b)
        self.region_a = region_a
        self.region_b = region_b

    def __str__(self):
        return 'no latency given between %s and %s' % (self.region_a, self.region_b)


class InvalidQuorumSize(ValueError):
    """
    Raised when a quorum cannot be defined, e.g., the cluster has less than two replicas, or the leader region has no
    replica that could act as leader.
    """
    pass


class LatencyEdge(NamedTuple):
    """
    One-way network latency between two regions. A region paired with itself describes the intra-region latency.
    """
    source: Region
    target: Region
    latency: Duration


class Role(enum.IntEnum):
    LEADER = 0
    FOLLOWER = 1


class Destination(namedtuple('Destination', ['role', 'region'])):
    """
    The replica a client request is sent to: either the leader, or a follower located in a specific region. Use the
    ``leader()`` and ``follower(region)`` constructors rather than instantiating directly.
    """
    __slots__ = ()

    def __new__(cls, role: Role, region: Optional[Region] = None):
        role = Role(role)
        if role == Role.LEADER and region is not None:
            raise ValueError('the leader destination has no region, got %r' % (region,))
        if role == Role.FOLLOWER and region is None:
            raise ValueError('a follower destination needs a region')
        return super().__new__(cls, role, region)

    @classmethod
    def leader(cls) -> 'Destination':
        return cls(Role.LEADER)

    @classmethod
    def follower(cls, region: Region) -> 'Destination':
        return cls(Role.FOLLOWER, region)

    @property
    def is_leader(self) -> bool:
        return self.role == Role.LEADER

    def sort_key(self):
        """
        Leader precedes all followers, followers are ordered by their region.
        """
        if self.is_leader:
            return (Role.LEADER,)
        return Role.FOLLOWER, self.region

    def __eq__(self, other):
        if not isinstance(other, Destination):
            return False
        return tuple(self) == tuple(other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Destination, self.role, self.region))

    def __lt__(self, other):
        if not isinstance(other, Destination):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other):
        if not isinstance(other, Destination):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other):
        if not isinstance(other, Destination):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other):
        if not isinstance(other, Destination):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __str__(self) -> str:
        if self.is_leader:
            return 'Leader'
        return f'Follower ({self.region})'

    def __repr__(self):
        if self.is_leader:
            return 'Destination.leader()'
        return f'Destination.follower({self.region!r})'


Leader = Destination.leader()
