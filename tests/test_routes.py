"""Tests for the JSON API routes and app-level error handling."""


def _create_student(client, name='Reader', lexile_level=500):
    resp = client.post('/students/', json={'name': name, 'lexile_level': lexile_level})
    assert resp.status_code == 201
    return resp.get_json()


def _create_book(client, title='Hatchet', lexile_level=600):
    resp = client.post('/books/', json={
        'title': title, 'author': 'Gary Paulsen', 'lexile_level': lexile_level,
    })
    assert resp.status_code == 201
    return resp.get_json()


def test_create_and_list_students(client):
    created = _create_student(client, 'Alice', 450)
    assert created['lexile_level'] == 450
    students = client.get('/students/').get_json()['students']
    assert [s['name'] for s in students] == ['Alice']


def test_create_student_requires_name(client):
    resp = client.post('/students/', json={'lexile_level': 300})
    assert resp.status_code == 400


def test_create_student_bad_lexile(client):
    resp = client.post('/students/', json={'name': 'X', 'lexile_level': 'abc'})
    assert resp.status_code == 400
    resp = client.post('/students/', json={'name': 'X', 'lexile_level': -10})
    assert resp.status_code == 400


def test_duplicate_student_conflict(client):
    _create_student(client, 'Alice')
    resp = client.post('/students/', json={'name': 'Alice'})
    assert resp.status_code == 409


def test_student_not_found(client):
    assert client.get('/students/999').status_code == 404
    assert client.get('/students/999/history').status_code == 404


def test_submit_quiz_with_score(client):
    s = _create_student(client, lexile_level=500)
    b = _create_book(client, lexile_level=600)
    resp = client.post('/quiz/submit', json={
        'student_id': s['id'], 'book_id': b['id'], 'score': 85,
    })
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['new_lexile'] == 530
    assert data['change_display'] == '+30L'

    detail = client.get(f"/students/{s['id']}").get_json()
    assert detail['lexile_level'] == 530
    assert detail['quizzes_completed'] == 1


def test_submit_quiz_with_answers(client):
    s = _create_student(client, lexile_level=600)
    b = _create_book(client, lexile_level=620)
    resp = client.post('/quiz/submit', json={
        'student_id': s['id'], 'book_id': b['id'],
        'answers': [1, 1, 2, 0], 'answer_key': [1, 1, 2, 3],
    })
    data = resp.get_json()
    assert data['score'] == 75
    assert data['change'] == 10


def test_submit_quiz_unknown_book(client):
    s = _create_student(client)
    resp = client.post('/quiz/submit', json={
        'student_id': s['id'], 'book_id': 42, 'score': 50,
    })
    assert resp.status_code == 404


def test_submit_quiz_invalid_score(client):
    s = _create_student(client)
    b = _create_book(client)
    resp = client.post('/quiz/submit', json={
        'student_id': s['id'], 'book_id': b['id'], 'score': 150,
    })
    assert resp.status_code == 400
    assert 'between 0 and 100' in resp.get_json()['error']


def test_submit_quiz_requires_json(client):
    resp = client.post('/quiz/submit', data='not json')
    assert resp.status_code == 400


def test_history_shows_change_display(client):
    s = _create_student(client, lexile_level=600)
    b = _create_book(client, lexile_level=620)
    client.post('/quiz/submit', json={'student_id': s['id'], 'book_id': b['id'], 'score': 40})
    data = client.get(f"/students/{s['id']}/history").get_json()
    assert data['total'] == 1
    assert data['attempts'][0]['change_display'] == '-5L'


def test_recommendations(client):
    s = _create_student(client, lexile_level=600)
    _create_book(client, 'Close', 640)
    _create_book(client, 'Too Hard', 1100)
    books = client.get(f"/students/{s['id']}/recommendations").get_json()['books']
    assert [b['title'] for b in books] == ['Close']


def test_preview_does_not_persist(client):
    resp = client.get('/quiz/preview?current=800&book=700&score=95')
    data = resp.get_json()
    assert data['change'] == 4
    assert data['new_lexile'] == 804
    assert data['change_display'] == '+4L'
    assert client.get('/dashboard/').get_json()['total_students'] == 0


def test_preview_requires_params(client):
    assert client.get('/quiz/preview?current=800').status_code == 400


def test_dashboard(client):
    _create_student(client, 'Maya', 720)
    _create_student(client, 'Liam', 410)
    data = client.get('/dashboard/').get_json()
    assert data['average_lexile'] == 565
    assert [s['name'] for s in data['students']] == ['Liam', 'Maya']


def test_unknown_route_is_json_404(client):
    resp = client.get('/nope')
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Not found'}


def test_error_handler_hides_details(app):
    """Error handler should NOT leak exception details to user."""
    @app.route('/test-500')
    def crash():
        raise ValueError('secret database password is xyz123')

    with app.test_client() as c:
        resp = c.get('/test-500')
        assert resp.status_code == 500
        body = resp.data.decode()
        assert 'xyz123' not in body
        assert 'Internal Server Error' in body


def test_wal_mode_set(temp_db):
    """SQLite WAL mode should be enabled."""
    from db.database import get_db
    conn = get_db()
    try:
        result = conn.execute('PRAGMA journal_mode').fetchone()
        assert result[0] == 'wal'
    finally:
        conn.close()


def test_foreign_keys_enabled(temp_db):
    from db.database import get_db
    conn = get_db()
    try:
        assert conn.execute('PRAGMA foreign_keys').fetchone()[0] == 1
    finally:
        conn.close()


def test_submit_quiz_answers_not_a_list(client):
    s = _create_student(client)
    b = _create_book(client)
    resp = client.post('/quiz/submit', json={
        'student_id': s['id'], 'book_id': b['id'], 'answers': 3, 'answer_key': [1],
    })
    assert resp.status_code == 400


def test_submit_quiz_id_not_an_integer(client):
    b = _create_book(client)
    resp = client.post('/quiz/submit', json={
        'student_id': [1], 'book_id': b['id'], 'score': 50,
    })
    assert resp.status_code == 400
    assert 'student_id' in resp.get_json()['error']


def test_submit_quiz_json_array_body(client):
    resp = client.post('/quiz/submit', json=[1, 2])
    assert resp.status_code == 400


def test_create_student_name_not_a_string(client):
    resp = client.post('/students/', json={'name': 42})
    assert resp.status_code == 400


def test_create_student_from_form(client):
    resp = client.post('/students/', data={'name': 'Formy', 'lexile_level': '380'})
    assert resp.status_code == 201
    assert resp.get_json()['lexile_level'] == 380


def test_create_book_title_not_a_string(client):
    resp = client.post('/books/', json={'title': 42})
    assert resp.status_code == 400


def test_create_book_negative_lexile_rejected(client):
    resp = client.post('/books/', json={'title': 'Upside Down', 'lexile_level': -20})
    assert resp.status_code == 400
    assert 'must not be negative' in resp.get_json()['error']


def test_create_book_bad_pages(client):
    resp = client.post('/books/', json={'title': 'Thin', 'pages': 'many'})
    assert resp.status_code == 400


def test_preview_rejects_non_finite_score(client):
    for score in ('nan', 'inf', '-inf'):
        resp = client.get(f'/quiz/preview?current=600&book=620&score={score}')
        assert resp.status_code == 400


def test_history_page_size_from_settings(client, monkeypatch):
    from config.settings import LEXILE_DEFAULTS
    monkeypatch.setitem(LEXILE_DEFAULTS, 'history_limit', 2)
    s = _create_student(client, lexile_level=600)
    b = _create_book(client, lexile_level=620)
    for score in (90, 75, 65):
        client.post('/quiz/submit', json={'student_id': s['id'], 'book_id': b['id'], 'score': score})

    first = client.get(f"/students/{s['id']}/history").get_json()
    second = client.get(f"/students/{s['id']}/history?page=2").get_json()
    assert first['total'] == 3
    assert len(first['attempts']) == 2
    assert len(second['attempts']) == 1
