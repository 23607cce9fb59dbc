def new_game(client, custom_word='house'):
    res = client.post('/api/new_game', json={'custom_word': custom_word})
    assert res.status_code == 200
    return res.get_json()['game_id']


def guess(client, game_id, word):
    return client.post(f'/api/game/{game_id}/guess', json={'guess': word})


def test_new_game_returns_hidden_state(client):
    res = client.post('/api/new_game')
    assert res.status_code == 200
    data = res.get_json()
    assert data['success']
    state = data['state']
    assert state['game_id'] == data['game_id']
    assert state['status'] == 'IN_PROGRESS'
    assert state['max_attempts'] == 6
    assert state['answer'] is None


def test_new_game_rejects_unknown_custom_word(client):
    res = client.post('/api/new_game', json={'custom_word': 'zzzzz'})
    assert res.status_code == 400
    assert not res.get_json()['success']


def test_unknown_game_is_404(client):
    assert client.get('/api/game/nope/state').status_code == 404
    assert guess(client, 'nope', 'house').status_code == 404


def test_win_flow_and_stats(client):
    game_id = new_game(client)

    for word in ('world', 'would'):
        res = guess(client, game_id, word)
        assert res.status_code == 200
        assert res.get_json()['state']['status'] == 'IN_PROGRESS'

    state = guess(client, game_id, 'house').get_json()['state']
    assert state['status'] == 'WON'
    assert state['has_won']
    assert state['attempts_used'] == 3
    assert state['answer'] == 'house'

    res = guess(client, game_id, 'world')
    assert res.status_code == 400

    stats = client.get('/api/stats').get_json()['stats']
    assert stats['wins'] == 1
    assert stats['games_played'] == 1
    assert stats['average_incorrect_guesses'] == 3.0
    assert len(stats['leaderboard']) == 1
    assert stats['leaderboard'][0]['rank'] == 1


def test_loss_flow_reveals_answer(client):
    game_id = new_game(client)
    for word in ('world', 'would', 'mouse', 'horse', 'route', 'those'):
        state = guess(client, game_id, word).get_json()['state']

    assert state['status'] == 'LOST'
    assert not state['has_won']
    assert state['answer'] == 'house'
    assert client.get('/api/stats').get_json()['stats']['losses'] == 1


def test_invalid_word_keeps_guesses(client):
    game_id = new_game(client)
    guess(client, game_id, 'world')

    res = guess(client, game_id, 'zzzzz')
    assert res.status_code == 400
    data = res.get_json()
    assert data['error'] == 'Not a valid word! Try again.'
    assert data['state']['guesses'] == ['world']
    assert data['state']['error_message'] == 'Not a valid word! Try again.'


def test_wrong_length_guess_is_rejected(client):
    game_id = new_game(client)
    res = guess(client, game_id, 'hous')
    assert res.status_code == 400
    assert res.get_json()['state']['attempts_used'] == 0


def test_typing_then_submitting(client):
    game_id = new_game(client)

    res = client.put(f'/api/game/{game_id}/input', json={'text': 'WOR'})
    assert res.get_json()['state']['current_input'] == 'wor'

    assert client.post(f'/api/game/{game_id}/guess', json={}).status_code == 400

    client.put(f'/api/game/{game_id}/input', json={'text': 'world'})
    state = client.post(f'/api/game/{game_id}/guess').get_json()['state']
    assert state['guesses'] == ['world']
    assert state['current_input'] == ''


def test_custom_word_endpoint(client):
    game_id = new_game(client)
    guess(client, game_id, 'world')

    res = client.post(f'/api/game/{game_id}/custom_word', json={'word': 'zzzzz'})
    assert res.status_code == 400
    assert res.get_json()['state']['guesses'] == ['world']

    res = client.post(f'/api/game/{game_id}/custom_word', json={'word': 'mouse'})
    assert res.status_code == 200
    assert res.get_json()['state']['guesses'] == []
    assert guess(client, game_id, 'mouse').get_json()['state']['has_won']


def test_restart_and_delete(client):
    game_id = new_game(client)
    guess(client, game_id, 'house')

    state = client.post(f'/api/game/{game_id}/restart').get_json()['state']
    assert state['status'] == 'IN_PROGRESS'
    assert state['guesses'] == []

    assert client.delete(f'/api/game/{game_id}').get_json()['success']
    assert client.get(f'/api/game/{game_id}/state').status_code == 404
    assert client.delete(f'/api/game/{game_id}').status_code == 404


def test_health(client):
    new_game(client)
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['stats_available']
