def new_game(client, **body):
    res = client.post('/api/new_game', json=body)
    assert res.status_code == 200
    return res.get_json()


def create_room(client, creator='alice', **extra):
    body = {'creator_id': creator, 'name': 'Race', 'creator_name': creator.title(), **extra}
    res = client.post('/api/rooms', json=body)
    assert res.status_code == 201
    return res.get_json()['room']['room_id']


def test_new_game_and_state(client):
    data = new_game(client)
    assert data['success'] is True
    assert data['state']['max_rounds'] == 6
    assert data['state']['answer'] is None

    res = client.get(f"/api/game/{data['game_id']}/state")
    assert res.status_code == 200
    assert res.get_json()['state']['outcome'] == 'ACTIVE'


def test_single_player_flow(client):
    game_id = new_game(client, max_rounds=3)['game_id']

    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'slate'})
    assert res.status_code == 200
    data = res.get_json()
    assert [r['status'] for r in data['result']] == ['MISS', 'MISS', 'HIT', 'MISS', 'HIT']
    assert data['state']['answer'] is None

    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'CRANE'})
    state = res.get_json()['state']
    assert state['outcome'] == 'WON'
    assert state['answer'] == 'CRANE'
    assert state['message'] == 'Congratulations! You won!'

    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'CRANE'})
    assert res.status_code == 409
    assert res.get_json()['error'] == 'GAME_OVER'


def test_guess_errors_are_distinguished(client):
    game_id = new_game(client)['game_id']

    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'CRANES'})
    assert res.status_code == 422
    assert res.get_json()['error'] == 'INVALID_FORMAT'

    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'CR4NE'})
    assert res.status_code == 422
    assert res.get_json()['message'] == 'Your guess must contain only letters.'

    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'QQQQQ'})
    assert res.status_code == 422
    body = res.get_json()
    assert body['error'] == 'WORD_NOT_FOUND'
    assert 'QQQQQ' in body['message']

    res = client.post(f'/api/game/{game_id}/guess', json={})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'INVALID_REQUEST'


def test_invalid_max_rounds(client):
    res = client.post('/api/new_game', json={'max_rounds': 0})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'INVALID_SETTINGS'


def test_unknown_game(client):
    res = client.get('/api/game/missing/state')
    assert res.status_code == 404
    assert res.get_json()['error'] == 'GAME_NOT_FOUND'


def test_delete_game_is_idempotent(client):
    game_id = new_game(client)['game_id']
    first = client.delete(f'/api/game/{game_id}')
    second = client.delete(f'/api/game/{game_id}')
    assert first.status_code == second.status_code == 200
    assert first.get_json()['deleted'] is True
    assert second.get_json()['deleted'] is False
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_health(client):
    new_game(client)
    create_room(client)
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['active_rooms'] == 1
    assert data['dictionary_size'] == 8


def test_room_flow_and_visibility(client):
    room_id = create_room(client)
    res = client.post(f'/api/rooms/{room_id}/join', json={'player_id': 'bob', 'name': 'Bob'})
    assert res.status_code == 200
    assert [p['player_id'] for p in res.get_json()['room']['players']] == ['alice', 'bob']

    listed = client.get('/api/rooms').get_json()['rooms']
    assert [room['room_id'] for room in listed] == [room_id]

    res = client.post(f'/api/rooms/{room_id}/start')
    assert res.status_code == 200
    assert res.get_json()['room']['status'] == 'IN_PROGRESS'
    assert client.get('/api/rooms').get_json()['rooms'] == []

    room = client.get(f'/api/rooms/{room_id}').get_json()['room']
    assert room['target_word'] is None

    res = client.post(f'/api/rooms/{room_id}/guess', json={'player_id': 'bob', 'guess': 'slate'})
    assert res.status_code == 200
    assert res.get_json()['player']['rounds_used'] == 1

    res = client.post(f'/api/rooms/{room_id}/guess', json={'player_id': 'alice', 'guess': 'crane'})
    player = res.get_json()['player']
    assert player['won'] is True
    assert player['rank'] == 1
    assert player['points'] == 10

    room = client.get(f'/api/rooms/{room_id}').get_json()['room']
    assert room['status'] == 'FINISHED'
    assert room['target_word'] == 'CRANE'
    assert room['players'][1]['rank'] == 2

    own = client.get(f'/api/rooms/{room_id}/players/bob').get_json()['player']
    assert own['guesses'] == ['SLATE']
    assert own['target_word'] == 'CRANE'


def test_room_errors(client):
    room_id = create_room(client, capacity=2)

    res = client.post(f'/api/rooms/{room_id}/start')
    assert res.status_code == 409
    assert res.get_json()['error'] == 'CANNOT_START'

    client.post(f'/api/rooms/{room_id}/join', json={'player_id': 'bob'})
    res = client.post(f'/api/rooms/{room_id}/join', json={'player_id': 'cara'})
    assert res.status_code == 409
    assert res.get_json()['error'] == 'ROOM_FULL'

    res = client.post(f'/api/rooms/{room_id}/guess', json={'player_id': 'bob', 'guess': 'CRANE'})
    assert res.status_code == 409
    assert res.get_json()['error'] == 'ROOM_NOT_IN_PROGRESS'

    client.post(f'/api/rooms/{room_id}/start')
    res = client.post(f'/api/rooms/{room_id}/guess', json={'player_id': 'mallory', 'guess': 'CRANE'})
    assert res.status_code == 404
    assert res.get_json()['error'] == 'PLAYER_NOT_FOUND'

    assert client.get('/api/rooms/NOPE').status_code == 404

    res = client.post('/api/rooms', json={'name': 'No creator'})
    assert res.status_code == 400

    res = client.post('/api/rooms', json={'creator_id': 'x', 'capacity': 1})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'INVALID_SETTINGS'


def test_leave_and_restart(client, rng):
    room_id = create_room(client)
    client.post(f'/api/rooms/{room_id}/join', json={'player_id': 'bob'})
    client.post(f'/api/rooms/{room_id}/join', json={'player_id': 'cara'})

    res = client.post(f'/api/rooms/{room_id}/leave', json={'player_id': 'cara'})
    assert res.status_code == 200
    assert res.get_json()['closed'] is False

    client.post(f'/api/rooms/{room_id}/start')
    client.post(f'/api/rooms/{room_id}/guess', json={'player_id': 'alice', 'guess': 'CRANE'})

    rng.word = 'HELLO'
    res = client.post(f'/api/rooms/{room_id}/restart')
    assert res.status_code == 200
    room = res.get_json()['room']
    assert room['status'] == 'IN_PROGRESS'
    assert all(p['rounds_used'] == 0 for p in room['players'])

    res = client.post(f'/api/rooms/{room_id}/guess', json={'player_id': 'bob', 'guess': 'hello'})
    assert res.get_json()['player']['won'] is True
