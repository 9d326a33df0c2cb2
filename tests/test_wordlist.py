import pytest

from src.data.subject import resolve_subject_text
from src.data.wordlist import load_builtin_words, load_dictionary, read_word_list
from src.spelling.errors import DictionarySourceUnavailable, InvalidArguments, SubjectUnavailable


def test_read_word_list_strips_terminators_and_skips_empty(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_bytes(b'the\r\nquick\n\nbrown\n\r\nfox')
    assert read_word_list(str(path)) == ['the', 'quick', 'brown', 'fox']


def test_read_word_list_keeps_inner_whitespace(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('ice cream\n trailing \n', encoding='utf-8')
    assert read_word_list(str(path)) == ['ice cream', ' trailing ']


def test_missing_word_list(tmp_path):
    with pytest.raises(DictionarySourceUnavailable):
        read_word_list(str(tmp_path / 'nope.txt'))


def test_undecodable_word_list(tmp_path):
    path = tmp_path / 'words.bin'
    path.write_bytes(b'\xff\xfe\xfa\n')
    with pytest.raises(DictionarySourceUnavailable):
        read_word_list(str(path))


def test_load_dictionary_from_env(tmp_path, monkeypatch):
    path = tmp_path / 'words.txt'
    path.write_text('alpha\nbeta\n', encoding='utf-8')
    monkeypatch.setenv('SPELLCHECK_WORDS', str(path))
    d = load_dictionary()
    assert d.contains('alpha')
    assert not d.contains('gamma')


def test_load_dictionary_explicit_path_wins(tmp_path, monkeypatch):
    path = tmp_path / 'words.txt'
    path.write_text('alpha\n', encoding='utf-8')
    monkeypatch.setenv('SPELLCHECK_WORDS', str(tmp_path / 'missing.txt'))
    assert load_dictionary(str(path)).contains('alpha')


def test_builtin_words():
    words = load_builtin_words('en')
    assert 'hello' in words
    assert '' not in words


def test_builtin_unknown_language():
    with pytest.raises(DictionarySourceUnavailable):
        load_builtin_words('xx-not-a-language')


def test_subject_literal_text(tmp_path):
    assert resolve_subject_text('the quick fox') == 'the quick fox'
    assert resolve_subject_text(str(tmp_path / 'missing.txt')) == str(tmp_path / 'missing.txt')
    assert resolve_subject_text('') == ''


def test_subject_file(tmp_path):
    path = tmp_path / 'subject.txt'
    path.write_text('the quikc\nbrown fox\n', encoding='utf-8')
    assert resolve_subject_text(str(path)) == 'the quikc\nbrown fox\n'


def test_subject_directory_is_literal(tmp_path):
    assert resolve_subject_text(str(tmp_path)) == str(tmp_path)


def test_subject_unreadable(tmp_path):
    path = tmp_path / 'subject.bin'
    path.write_bytes(b'\xff\xfe\xfa')
    with pytest.raises(SubjectUnavailable):
        resolve_subject_text(str(path))


def test_subject_missing():
    with pytest.raises(InvalidArguments):
        resolve_subject_text(None)
