import pytest

from knitlang.errors import LexError
from knitlang.lexer import tokenize


def kinds(source):
    return [(t.type, t.value) for t in tokenize(source)]


def test_lexer_keywords_identifiers_and_integers():
    assert kinds('cast_on stitches = 42;') == [
        ('cast_on', 'cast_on'),
        ('IDENT', 'stitches'),
        ('=', '='),
        ('INT', '42'),
        (';', ';'),
        ('EOF', ''),
    ]


def test_lexer_all_keywords_are_reserved():
    for word in ('cast_on', 'knit', 'purl', 'repeat', 'bind_off'):
        assert tokenize(word)[0].type == word


def test_lexer_keyword_prefix_is_an_identifier():
    assert kinds('knitting purl_2 _x') == [
        ('IDENT', 'knitting'), ('IDENT', 'purl_2'), ('IDENT', '_x'), ('EOF', ''),
    ]


def test_lexer_operators_and_braces_without_spaces():
    assert [t.type for t in tokenize('repeat 2{purl a+b*c-d/e;}')] == [
        'repeat', 'INT', '{', 'purl', 'IDENT', '+', 'IDENT', '*', 'IDENT',
        '-', 'IDENT', '/', 'IDENT', ';', '}', 'EOF',
    ]


def test_lexer_empty_source_is_just_eof():
    tokens = tokenize(' \t\r\n ')
    assert len(tokens) == 1
    assert tokens[0].type == 'EOF'


def test_lexer_tracks_positions():
    tokens = tokenize('cast_on x = 1;\n  purl x;')
    purl = tokens[5]
    assert purl.type == 'purl'
    assert (purl.line, purl.column, purl.offset) == (2, 3, 17)
    eof = tokens[-1]
    assert eof.offset == len('cast_on x = 1;\n  purl x;')


def test_lexer_rejects_unknown_character():
    with pytest.raises(LexError) as excinfo:
        tokenize('cast_on x = 1;\npurl x % 2;')
    err = excinfo.value
    assert err.character == '%'
    assert (err.line, err.column) == (2, 8)
    assert err.offset == 22
    assert 'line 2, column 8' in str(err)


def test_lexer_has_no_comment_syntax():
    with pytest.raises(LexError):
        tokenize('# a comment')
    with pytest.raises(LexError):
        tokenize('purl (1);')


def test_lexer_relexing_joined_values_is_stable():
    source = 'cast_on stitches=0;repeat 3{knit stitches=stitches+1;purl stitches;}bind_off;'
    tokens = tokenize(source)
    joined = ' '.join(t.value for t in tokens if t.type != 'EOF')
    assert kinds(joined) == [(t.type, t.value) for t in tokens]
