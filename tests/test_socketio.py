def test_socket_connect_and_join(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    sio_client.get_received('/ws')

    sio_client.emit('join_match', {'matchId': '1'}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'joined' and pkt['args'][0]['room'] == 'match:1' for pkt in received)


def test_join_without_match_id_errors(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('join_match', {}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'error' for pkt in received)


def test_ping(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'pong' and pkt['args'][0] == {'n': 1} for pkt in received)


def test_waiting_player_hears_opponent_join(sio_client, guest_client, other_guest_client):
    match = guest_client.post('/api/match/create').get_json()
    sio_client.emit('join_match', {'matchId': match['matchId']}, namespace='/ws')
    sio_client.get_received('/ws')

    other_guest_client.post('/api/match/create')
    events = sio_client.get_received('/ws')
    updates = [e for e in events if e['name'] == 'match_update']
    assert updates
    assert updates[-1]['args'][0]['match']['state'] == 'playing'


def test_leaving_stops_updates(sio_client, guest_client, other_guest_client):
    match = guest_client.post('/api/match/create').get_json()
    sio_client.emit('join_match', {'matchId': match['matchId']}, namespace='/ws')
    sio_client.emit('leave_match', {'matchId': match['matchId']}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'left' for pkt in received)

    other_guest_client.post('/api/match/create')
    assert not any(e['name'] == 'match_update' for e in sio_client.get_received('/ws'))


def test_connect_names_the_namespace(flask_app):
    from senas import socketio
    for namespace in ('/ws', '/'):
        test_client = socketio.test_client(flask_app, namespace=namespace)
        received = test_client.get_received(namespace)
        assert {'message': f'Connected to {namespace}'} in [
            pkt['args'][0] for pkt in received if pkt['name'] == 'connected'
        ]
        test_client.disconnect(namespace=namespace)
