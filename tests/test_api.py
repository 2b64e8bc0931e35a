"""Tests de la API REST de topología."""
import pytest
from fastapi.testclient import TestClient

from app import app
from api.routers import topology as topology_router
from topology.data import SnapshotLoader


@pytest.fixture
def client():
    return TestClient(app)


def test_routes():
    """Verifica que todas las rutas estén registradas."""
    paths = {route.path for route in app.routes if hasattr(route, 'methods')}
    
    assert {
        '/',
        '/api/topology/analyze',
        '/api/topology/snapshot',
        '/api/topology/path',
        '/api/topology/centrality',
        '/api/topology/export/graphml',
    } <= paths


def test_root(client):
    body = client.get('/').json()
    assert body['docs'] == '/docs'
    assert 'version' in body


def test_analyze(client, snapshot_records):
    response = client.post('/api/topology/analyze', json={'nodes': snapshot_records})
    assert response.status_code == 200
    
    body = response.json()
    assert body['summary']['node_count'] == 4
    assert body['summary']['edge_count'] == 4
    assert body['summary']['diameter'] == 2
    assert body['summary']['is_connected'] is True
    assert body['bottlenecks'][0] == 'n3'
    assert [set(b) for b in body['bridges']] == [{'n3', 'n4'}]
    assert body['status'] == 'elevated'


def test_analyze_disconnected_reports_null_diameter(client):
    nodes = [
        {'nodeId': 'a', 'peersList': ['b']},
        {'nodeId': 'b', 'peersList': ['a']},
        {'nodeId': 'c', 'peersList': []},
    ]
    body = client.post('/api/topology/analyze', json={'nodes': nodes}).json()
    
    assert body['summary']['diameter'] is None
    assert body['status'] == 'critical'


def test_analyze_rejects_duplicate_ids(client, snapshot_records):
    response = client.post('/api/topology/analyze',
                           json={'nodes': snapshot_records + [snapshot_records[0]]})
    assert response.status_code == 400


def test_path(client, snapshot_records):
    body = client.post('/api/topology/path', json={
        'nodes': snapshot_records, 'source': 'n2', 'target': 'n4'
    }).json()
    
    assert body['path'] == ['n2', 'n3', 'n4']
    assert body['hops'] == 2


def test_path_unknown_node(client, snapshot_records):
    body = client.post('/api/topology/path', json={
        'nodes': snapshot_records, 'source': 'n1', 'target': 'ghost'
    }).json()
    
    assert body['path'] is None
    assert body['hops'] is None


def test_centrality(client, snapshot_records):
    body = client.post('/api/topology/centrality', json={'nodes': snapshot_records}).json()
    
    assert body['total'] == 4
    top = body['nodes'][0]
    assert top['node_id'] == 'n3'
    assert top['betweenness'] == pytest.approx(2.0)
    assert top['degree'] == 3
    assert top['degree_centrality'] == pytest.approx(1.0)


def test_export_graphml(client, snapshot_records):
    response = client.post('/api/topology/export/graphml', json={'nodes': snapshot_records})
    
    assert response.status_code == 200
    assert response.headers['content-type'].startswith('application/xml')
    assert 'attachment' in response.headers['content-disposition']
    assert '<node id="n1">' in response.text
    assert response.text.count('<edge ') == 4


def test_snapshot_file_missing(client, tmp_path, monkeypatch):
    topology_router.get_dependencies()
    monkeypatch.setattr(topology_router, '_loader', SnapshotLoader(tmp_path / 'missing.json'))
    
    assert client.get('/api/topology/snapshot').status_code == 404


def test_snapshot_file(client, snapshot_file, monkeypatch):
    topology_router.get_dependencies()
    monkeypatch.setattr(topology_router, '_loader', SnapshotLoader(snapshot_file))
    
    response = client.get('/api/topology/snapshot')
    assert response.status_code == 200
    
    body = response.json()
    assert body['summary']['node_count'] == 4
    assert body['status'] == 'elevated'
