from senas import db
from senas.models import GuestUser


def test_home_shows_greeting_and_footer(client):
    res = client.get('/')
    assert res.status_code == 200
    html = res.get_data(as_text=True)
    assert 'name="username"' in html
    assert 'Creado por' in html
    assert 'Mariana Díaz' in html


def test_home_form_starts_session(flask_app, client):
    res = client.post('/', data={'username': 'ana'})
    assert res.status_code == 302
    assert res.headers['Location'].endswith('/game')
    assert client.get_cookie('guest_session_token') is not None
    with flask_app.app_context():
        assert GuestUser.query.filter_by(username='ana').count() == 1


def test_home_redirects_when_session_exists(guest_client):
    res = guest_client.get('/')
    assert res.status_code == 302
    assert res.headers['Location'].endswith('/game')


def test_game_requires_session(client):
    res = client.get('/game')
    assert res.status_code == 302
    assert res.headers['Location'].endswith('/')


def test_game_page_with_empty_leaderboard(guest_client):
    html = guest_client.get('/game').get_data(as_text=True)
    assert 'Bienvenido, ana!' in html
    assert 'Buscar partida' in html
    assert 'No hay jugadores en el leaderboard aún.' in html


def test_game_page_lists_players(flask_app, guest_client):
    with flask_app.app_context():
        db.session.add(GuestUser(username='beto', profile_icon_number=2, score=4))
        db.session.commit()
    html = guest_client.get('/game').get_data(as_text=True)
    assert 'beto: 4' in html
    assert 'No hay jugadores en el leaderboard aún.' not in html


def test_play_button_creates_match_then_offers_rejoin(guest_client):
    res = guest_client.post('/game/play')
    assert res.status_code == 302
    assert res.headers['Location'].endswith('/match/1')

    html = guest_client.get('/game').get_data(as_text=True)
    assert 'Unirse a partida en curso' in html
    assert '/match/1' in html

    page = guest_client.get('/match/1')
    assert page.status_code == 200
    assert 'Esperando a otro jugador' in page.get_data(as_text=True)


def test_play_button_failure_shows_error_dialog(monkeypatch, guest_client):
    import senas.pages

    def broken(user):
        raise RuntimeError('database unavailable')

    monkeypatch.setattr(senas.pages, 'create_or_join_match', broken)
    res = guest_client.post('/game/play', follow_redirects=True)
    assert res.status_code == 200
    assert 'No se pudo crear la partida. Por favor, intenta nuevamente.' in res.get_data(as_text=True)


def test_unknown_match_page_is_404(client):
    assert client.get('/match/42').status_code == 404
