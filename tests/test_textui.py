from click.testing import CliRunner

from wordle.cli import cli


def play(dictpath, keys, *args):
    runner = CliRunner()
    return runner.invoke(cli, ['--text', '--dict', str(dictpath), *args], input=keys)


def test_win(dictpath):
    result = play(dictpath, 'cat\nzzzzz\nreact\ncrate\nno\n', 'crate')

    assert result.exit_code == 0, result.output
    assert 'using given word: crate' in result.output
    assert 'too short' in result.output
    assert 'not a valid word in the dictionary' in result.output
    assert 'You got it in 2 tries!' in result.output
    assert 'CRATE' in result.output
    assert '🟩🟩🟩🟩🟩' in result.output


def test_alphabet_summary(dictpath):
    result = play(dictpath, 'react\n', 'crate')

    assert 'Unguessed [' in result.output
    assert 'Exact [A]' in result.output
    assert 'Present [C, E, R, T]' in result.output


def test_lose(dictpath):
    result = play(dictpath, 'blind\n' * 6 + 'no\n', 'crate')

    assert result.exit_code == 0, result.output
    assert 'You ran out of tries.' in result.output
    assert 'Good game! The word was' in result.output


def test_play_again(dictpath):
    result = play(dictpath, 'crate\nmaybe\nyes\ncrate\nno\n', 'crate')

    assert result.exit_code == 0, result.output
    assert "You didn't answer with yes or no" in result.output
    assert result.output.count('You got it in 1 tries!') == 2


def test_seeded_game(dictpath):
    result = play(dictpath, '', '--seed', '3')

    assert result.exit_code == 0, result.output
    assert "I picked a word, what's your guess?" in result.output


def test_unknown_start_word(dictpath):
    result = play(dictpath, '', 'zzzzz')

    assert result.exit_code == 2
    assert 'not in the dictionary' in result.output


def test_empty_dictionary(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('cat\n')

    result = play(path, '')

    assert result.exit_code == 1
    assert 'no 5 letter words' in result.output
