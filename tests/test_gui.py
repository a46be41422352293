import pytest
import urwid

from wordle.gui import App
from wordle.state import GameStatus


@pytest.fixture
def app(words):
    app = App(dict(
        words=words,
        dict=None,
        start_word='crate',
        seed=None,
        strict=False,
    ))
    app.setup()
    return app


def type_word(app, word):
    for c in word:
        app.handle_keypress(c)


def test_typing_fills_current_row(app):
    type_word(app, 'reacts')

    assert app.pending.value == 'react'
    assert app.frame.win_board.row_text(0) == 'REACT'

    app.handle_keypress('backspace')
    assert app.frame.win_board.row_text(0) == 'REAC'


def test_accepted_guess_colors_board_and_keyboard(app):
    type_word(app, 'react')
    app.handle_keypress('enter')

    board = app.frame.win_board
    assert board.current_row == 1
    assert [tile.attr for tile in board.tiles[0]] == ['present', 'present', 'exact', 'present', 'present']

    keys = app.frame.win_keyboard.keys
    assert keys['a'].attr == 'exact'
    assert keys['r'].attr == 'present'
    assert keys['z'].attr == 'blank'

    assert app.pending.value == ''
    assert 'attempt 2 of 6' in app.frame.win_status.text


def test_rejected_guess_shows_message(app):
    type_word(app, 'zzzzz')
    app.handle_keypress('enter')

    assert 'not a valid word' in app.frame.win_status.text
    assert app.game.attempts == ()
    assert app.frame.win_board.row_text(0) == 'ZZZZZ'


def test_short_guess_shows_message(app):
    type_word(app, 'cra')
    app.handle_keypress('enter')

    assert 'too short' in app.frame.win_status.text


def test_win_and_new_game(app):
    type_word(app, 'CRATE')
    app.handle_keypress('enter')

    assert app.game.status is GameStatus.WON
    assert 'You got it in 1 tries!' in app.frame.win_status.text

    # letters are ignored once the game is over
    app.handle_keypress('a')
    assert app.pending.value == ''

    app.handle_keypress('n')
    assert app.game.status is GameStatus.IN_PROGRESS
    assert app.frame.win_board.current_row == 0
    assert app.frame.win_board.row_text(0) == ''
    assert app.frame.win_keyboard.keys['a'].attr == 'blank'


def test_lose(app):
    for _ in range(6):
        type_word(app, 'blind')
        app.handle_keypress('enter')

    assert app.game.status is GameStatus.LOST
    assert 'The word was CRATE' in app.frame.win_status.text


def test_other_keys(app):
    assert app.handle_keypress('f1') == 'f1'
    assert app.handle_keypress('1') == '1'

    with pytest.raises(urwid.ExitMainLoop):
        app.handle_keypress('esc')


def test_frame_renders(app):
    type_word(app, 'react')
    app.handle_keypress('enter')
    type_word(app, 'cr')

    canvas = app.frame.render((60, 30))
    text = b'\n'.join(canvas.text).decode('utf-8')

    assert 'Wordle' in text
    assert 'R' in text and 'Letters' in text
