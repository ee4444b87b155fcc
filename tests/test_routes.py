KA_U = '\u0D15\u0D41'
PRA = '\u0D2A\u0D4D\u0D30'


def test_index(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'online'


def test_health(client):
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['encodings'] == ['ml', 'fml']
    assert data['reorder_ra_subjoin'] is True


def test_convert_defaults_to_ml(client):
    response = client.post('/api/convert', json={'text': KA_U})
    assert response.status_code == 200
    assert response.get_json() == {'status': 'success', 'encoding': 'ml', 'output': 'æ'}


def test_convert_fml(client):
    response = client.post('/api/convert', json={'text': KA_U, 'encoding': 'font_b'})
    assert response.get_json()['encoding'] == 'fml'
    assert response.get_json()['output'] == 'ku'


def test_convert_blank_text(client):
    response = client.post('/api/convert', json={'text': '   '})
    assert response.status_code == 200
    assert response.get_json()['output'] == ''


def test_convert_respects_ra_subjoin_setting(client, no_ra_client):
    assert client.post('/api/convert', json={'text': PRA}).get_json()['output'] == '{]'
    assert no_ra_client.post('/api/convert', json={'text': PRA}).get_json()['output'] == ']{'


def test_convert_requires_text(client):
    response = client.post('/api/convert', json={'encoding': 'ml'})
    assert response.status_code == 400
    assert 'text' in response.get_json()['error']


def test_convert_rejects_non_string_text(client):
    response = client.post('/api/convert', json={'text': ['a']})
    assert response.status_code == 400


def test_convert_rejects_unknown_encoding(client):
    response = client.post('/api/convert', json={'text': KA_U, 'encoding': 'ism'})
    assert response.status_code == 400
    assert 'Unsupported encoding' in response.get_json()['error']


def test_convert_rejects_non_json_body(client):
    response = client.post('/api/convert', data='text', content_type='text/plain')
    assert response.status_code == 400


def test_stats_route(client):
    response = client.post('/api/stats', json={'text': 'കേരളം abc', 'encoding': 'ml'})
    assert response.status_code == 200
    assert response.get_json()['stats'] == {
        'input_length': 9,
        'output_length': 9,
        'output_text': 'tIcfw abc',
        'malayalam_char_count': 5,
    }


def test_download_route(client):
    response = client.post('/api/download', json={'text': KA_U + ' \u0D67'})
    assert response.status_code == 200
    assert response.data == b'\xe6 ?'
    assert response.headers['Content-Type'] == 'text/plain; charset=cp1252'
    assert 'converted_ml.txt' in response.headers['Content-Disposition']


def test_encodings_route(client):
    data = client.get('/api/encodings').get_json()
    assert data['default'] == 'ml'
    assert [e['name'] for e in data['encodings']] == ['ML-TTKarthika', 'FML-Revathi']


def test_unknown_route_returns_json(client):
    response = client.get('/api/missing')
    assert response.status_code == 404
    assert 'error' in response.get_json()


def test_wrong_method_returns_json(client):
    response = client.get('/api/convert')
    assert response.status_code == 405
    assert 'error' in response.get_json()
