"""Tests for the Flask calculator API."""

from api import SessionStore


def _new_session(client):
    response = client.post('/api/sessions')
    assert response.status_code == 201
    return response.get_json()['data']['session_id']


def _keys(client, session_id, *keys):
    data = None
    for key in keys:
        response = client.post(f'/api/sessions/{session_id}/key', json={'key': key})
        assert response.status_code == 200, response.get_json()
        data = response.get_json()['data']
    return data


def test_api_info(client):
    response = client.get('/api')
    body = response.get_json()
    assert body['success'] is True
    assert body['data']['name'] == "PocketCalc"


def test_create_session_returns_initial_state(client):
    response = client.post('/api/sessions')
    body = response.get_json()
    assert body['success'] is True
    assert body['data']['state'] == {
        'display': "0",
        'current_operand': "0",
        'previous_operand': "",
        'pending_operator': None,
        'reset_on_next_digit': False,
        'error': False,
    }


def test_keys_compute_fixed_point_sum(client):
    session_id = _new_session(client)
    state = _keys(client, session_id, "0", ".", "1", "+", "0", ".", "2", "Enter")
    assert state['display'] == "0.3"

    response = client.get(f'/api/sessions/{session_id}')
    assert response.get_json()['data']['display'] == "0.3"


def test_pending_operator_in_state(client):
    session_id = _new_session(client)
    state = _keys(client, session_id, "7", "/")
    assert state['pending_operator'] == "÷"
    assert state['previous_operand'] == "7"


def test_actions(client):
    session_id = _new_session(client)
    url = f'/api/sessions/{session_id}/action'
    client.post(url, json={'action': 'digit', 'value': '5'})
    client.post(url, json={'action': 'divide'})
    client.post(url, json={'action': 'digit', 'value': '0'})
    response = client.post(url, json={'action': 'equals'})
    data = response.get_json()['data']
    assert data['display'] == "Error"
    assert data['error'] is True


def test_sessions_are_independent(client):
    first = _new_session(client)
    second = _new_session(client)
    _keys(client, first, "4", "2")
    response = client.get(f'/api/sessions/{second}')
    assert response.get_json()['data']['display'] == "0"


def test_unmapped_key(client):
    session_id = _new_session(client)
    response = client.post(f'/api/sessions/{session_id}/key', json={'key': 'q'})
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_invalid_action(client):
    session_id = _new_session(client)
    url = f'/api/sessions/{session_id}/action'
    assert client.post(url, json={'action': 'sqrt'}).status_code == 400
    assert client.post(url, json={'action': 'digit', 'value': '42'}).status_code == 400


def test_missing_body(client):
    session_id = _new_session(client)
    assert client.post(f'/api/sessions/{session_id}/key').status_code == 400
    assert client.post(f'/api/sessions/{session_id}/action', json={}).status_code == 400


def test_unknown_session(client):
    assert client.get('/api/sessions/nope').status_code == 404
    response = client.post('/api/sessions/nope/key', json={'key': '1'})
    assert response.status_code == 404
    assert client.delete('/api/sessions/nope').status_code == 404


def test_delete_session(client):
    session_id = _new_session(client)
    assert client.delete(f'/api/sessions/{session_id}').get_json() == {'success': True}
    assert client.get(f'/api/sessions/{session_id}').status_code == 404


def test_cors_header(client):
    response = client.get('/api', headers={'Origin': 'http://example.com'})
    assert response.headers.get('Access-Control-Allow-Origin') == '*'


def test_session_store_drops_least_recently_used():
    store = SessionStore(max_sessions=2)
    first, _ = store.create()
    second, _ = store.create()
    store.apply(first, lambda engine: engine.append_digit("1"))
    third, _ = store.create()

    assert len(store) == 2
    assert first in store
    assert second not in store
    assert third in store


def test_non_object_body(client):
    session_id = _new_session(client)
    for url, body in ((f'/api/sessions/{session_id}/key', ["7"]),
                      (f'/api/sessions/{session_id}/action', "digit")):
        response = client.post(url, json=body)
        assert response.status_code == 400
        assert response.get_json()['success'] is False
