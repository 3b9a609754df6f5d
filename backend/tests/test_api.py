

def _encrypt(test_client, value):
    res = test_client.post('/api/oracle/encrypt', json={'value': value})
    assert res.status_code == 201
    return res.get_json()


def _submit(test_client, value):
    enc = _encrypt(test_client, value)
    return test_client.post('/api/scores/submit', json=enc)


def _best_value(test_client, player):
    res = test_client.get(f'/api/scores/{player}/best')
    assert res.status_code == 200
    handle = res.get_json()['handle']
    res = test_client.post('/api/oracle/decrypt', json={'handle': handle})
    assert res.status_code == 200
    return res.get_json()['value']


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_login_and_me(alice_client):
    res = alice_client.get('/me')
    assert res.status_code == 200
    assert res.get_json()['identity'] == 'alice'


def test_bad_login(client):
    client.post('/users/add', json={'username': 'alice', 'password': 'password'})
    res = client.post('/login', json={'username': 'alice', 'password': 'nope'})
    assert res.status_code == 401


def test_submit_requires_login(client):
    res = client.post('/api/scores/submit', json={'handle': '0x' + '00' * 32, 'proof': 'a.b.c'})
    assert res.status_code == 401


def test_best_before_submission(client):
    res = client.get('/api/scores/alice/best')
    assert res.status_code == 404
    data = res.get_json()
    assert data['error'] == 'Player has not submitted any score'
    assert data['code'] == 'not_submitted'


def test_scenario_a_first_submission(alice_client):
    res = _submit(alice_client, 25)
    assert res.status_code == 200
    assert res.get_json()['player'] == 'alice'
    assert res.get_json()['submissions'] == 1
    assert res.get_json()['handle'] == alice_client.get('/api/scores/alice/best').get_json()['handle']
    assert _best_value(alice_client, 'alice') == 25


def test_scenario_b_higher_replaces(alice_client):
    assert _submit(alice_client, 40).status_code == 200
    assert _submit(alice_client, 99).status_code == 200
    assert _best_value(alice_client, 'alice') == 99


def test_scenario_c_lower_is_ignored(alice_client):
    assert _submit(alice_client, 88).status_code == 200
    assert _submit(alice_client, 12).status_code == 200
    assert _best_value(alice_client, 'alice') == 88


def test_scenario_d_isolated_players(alice_client, bob_client):
    assert _submit(alice_client, 55).status_code == 200
    assert _submit(bob_client, 77).status_code == 200
    assert _best_value(alice_client, 'alice') == 55
    assert _best_value(bob_client, 'bob') == 77


def test_scenario_e_has_submitted(alice_client):
    res = alice_client.get('/api/scores/alice/submitted')
    assert res.get_json() == {'player': 'alice', 'has_submitted': False}
    assert _submit(alice_client, 50).status_code == 200
    res = alice_client.get('/api/scores/alice/submitted')
    assert res.get_json() == {'player': 'alice', 'has_submitted': True}


def test_cannot_submit_someone_elses_ciphertext(alice_client, bob_client):
    enc = _encrypt(alice_client, 1000)
    res = bob_client.post('/api/scores/submit', json=enc)
    assert res.status_code == 403
    assert res.get_json()['code'] == 'proof_mismatch'
    assert bob_client.get('/api/scores/bob/submitted').get_json()['has_submitted'] is False


def test_malformed_submission(alice_client):
    enc = _encrypt(alice_client, 10)
    res = alice_client.post('/api/scores/submit', json={'handle': enc['handle'], 'proof': 'not-a-proof'})
    assert res.status_code == 400
    assert res.get_json()['code'] == 'malformed_proof'
    res = alice_client.post('/api/scores/submit', json={'handle': enc['handle']})
    assert res.status_code == 400
    assert alice_client.get('/api/scores/alice/submitted').get_json()['has_submitted'] is False


def test_only_owner_can_decrypt(alice_client, bob_client):
    assert _submit(alice_client, 31).status_code == 200
    handle = bob_client.get('/api/scores/alice/best').get_json()['handle']
    res = bob_client.post('/api/oracle/decrypt', json={'handle': handle})
    assert res.status_code == 403
    res = bob_client.get(f'/api/scores/grants/{handle}', query_string={'identity': 'bob'})
    assert res.get_json()['authorized'] is False
    res = bob_client.get(f'/api/scores/grants/{handle}', query_string={'identity': 'alice'})
    assert res.get_json()['authorized'] is True


def test_encrypt_rejects_out_of_range(alice_client):
    res = alice_client.post('/api/oracle/encrypt', json={'value': 2 ** 32})
    assert res.status_code == 400
    res = alice_client.post('/api/oracle/encrypt', json={'value': -1})
    assert res.status_code == 400
