"""
Pytest configuration and fixtures.
"""
import json

import pytest

from topology.core.graph import build_adjacency


# A-B, B-C, C-D y el atajo A-C
SIMPLE_NODES = ['A', 'B', 'C', 'D']
SIMPLE_EDGES = [('A', 'B'), ('B', 'C'), ('C', 'D'), ('A', 'C')]

TRIANGLE_NODES = ['A', 'B', 'C']
TRIANGLE_EDGES = [('A', 'B'), ('B', 'C'), ('A', 'C')]

STAR_NODES = ['hub', 'spoke1', 'spoke2', 'spoke3', 'spoke4']
STAR_EDGES = [('hub', f'spoke{i}') for i in range(1, 5)]

# Dos triángulos unidos por la arista A3-B1
BRIDGE_NODES = ['A1', 'A2', 'A3', 'B1', 'B2', 'B3']
BRIDGE_EDGES = [
    ('A1', 'A2'), ('A2', 'A3'), ('A1', 'A3'),
    ('B1', 'B2'), ('B2', 'B3'), ('B1', 'B3'),
    ('A3', 'B1'),
]


@pytest.fixture
def simple_adj():
    return build_adjacency(SIMPLE_NODES, SIMPLE_EDGES)


@pytest.fixture
def triangle_adj():
    return build_adjacency(TRIANGLE_NODES, TRIANGLE_EDGES)


@pytest.fixture
def star_adj():
    return build_adjacency(STAR_NODES, STAR_EDGES)


@pytest.fixture
def bridge_adj():
    return build_adjacency(BRIDGE_NODES, BRIDGE_EDGES)


@pytest.fixture
def disconnected_adj():
    """A-B conectados, C aislado."""
    return build_adjacency(['A', 'B', 'C'], [('A', 'B')])


@pytest.fixture
def snapshot_records():
    """Snapshot tal como lo sirve el API de métricas de nodos."""
    return [
        {
            'nodeId': 'n1', 'nodeName': 'alpha', 'peersList': ['n2', 'n3', 'ghost'],
            'peersCount': 3, 'client': 'concordium-node 6.3',
            'bakingCommitteeMember': 'ActiveInCommittee', 'consensusBakerId': 7,
            'finalizedBlockHeight': 1200,
        },
        {
            'nodeId': 'n2', 'nodeName': 'beta', 'peersList': ['n1', 'n3'],
            'peersCount': 2, 'client': 'concordium-node 6.3',
            'bakingCommitteeMember': 'NotInCommittee', 'consensusBakerId': None,
            'finalizedBlockHeight': 1199,
        },
        {
            'nodeId': 'n3', 'nodeName': None, 'peersList': ['n1', 'n2', 'n4', 'n3'],
            'peersCount': 3, 'client': 'concordium-node 6.2',
            'bakingCommitteeMember': 'ActiveInCommittee', 'consensusBakerId': 12,
            'finalizedBlockHeight': 1200,
        },
        {
            'nodeId': 'n4', 'nodeName': 'delta', 'peersList': ['n3'],
            'peersCount': 1, 'client': 'concordium-node 6.2',
            'bakingCommitteeMember': 'NotInCommittee', 'consensusBakerId': None,
            'finalizedBlockHeight': 1150,
        },
    ]


@pytest.fixture
def snapshot_file(tmp_path, snapshot_records):
    """Snapshot persistido en disco como array JSON."""
    path = tmp_path / 'nodes.json'
    path.write_text(json.dumps(snapshot_records), encoding='utf-8')
    return path
