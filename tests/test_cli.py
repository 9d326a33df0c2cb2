import pytest

from src.spelling.cli import main


@pytest.fixture
def words_file(tmp_path, monkeypatch):
    monkeypatch.delenv('SPELLCHECK_LANGUAGE', raising=False)
    path = tmp_path / 'words.txt'
    path.write_text('the\nquick\nbrown\nfox\n', encoding='utf-8')
    return str(path)


def test_check_literal_text(words_file, capsys):
    assert main(['--words', words_file, 'the quikc brown fox']) == 0
    assert capsys.readouterr().out == 'the {quikc} brown fox\n'


def test_check_file_subject(words_file, tmp_path, capsys):
    subject = tmp_path / 'essay.txt'
    subject.write_text('the\nbrown  fxo\n', encoding='utf-8')
    assert main(['--words', words_file, str(subject)]) == 0
    assert capsys.readouterr().out == 'the brown {fxo}\n'


def test_empty_subject(words_file, capsys):
    assert main(['--words', words_file, '']) == 0
    assert capsys.readouterr().out == '\n'


def test_words_from_env(words_file, monkeypatch, capsys):
    monkeypatch.setenv('SPELLCHECK_WORDS', words_file)
    assert main(['fox']) == 0
    assert capsys.readouterr().out == 'fox\n'


def test_brief_description(capsys):
    assert main(['--brief-description']) == 0
    assert capsys.readouterr().out == 'checks spelling of word or content\n'


def test_missing_subject(capsys):
    assert main([]) == 2
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'usage:' in captured.err


def test_dictionary_unavailable(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv('SPELLCHECK_LANGUAGE', raising=False)
    assert main(['--words', str(tmp_path / 'missing.txt'), 'the fox']) == 3
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'dictionary source unavailable' in captured.err


def test_subject_unavailable(words_file, tmp_path, capsys):
    subject = tmp_path / 'bad.txt'
    subject.write_bytes(b'\xff\xfe\xfa')
    assert main(['--words', words_file, str(subject)]) == 4
    assert capsys.readouterr().out == ''


def test_verbose_reports_on_stderr(words_file, capsys):
    assert main(['--verbose', '--words', words_file, 'fox']) == 0
    captured = capsys.readouterr()
    assert captured.out == 'fox\n'
    assert 'Loaded 4 words' in captured.err


def test_builtin_language(capsys):
    assert main(['--language', 'en', 'hello qwxzvbn']) == 0
    assert capsys.readouterr().out == 'hello {qwxzvbn}\n'
