## chainopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from chainopt.types import Arity, OptionSpec
from chainopt.grammar import Grammar, classify
from chainopt.errors import GrammarSpecError


def test_short_spec_markers_follow_their_letter():
    grammar = Grammar.from_spec('ab:c;;')
    assert list(grammar.short) == ['a', 'b', 'c']
    assert grammar.short['a'].markers == ()
    assert grammar.short['b'].markers == (':',)
    assert grammar.short['c'].markers == (';', ';')
    assert not grammar.short['c'].long


def test_empty_spec_declares_nothing():
    grammar = Grammar.from_spec('')
    assert grammar.short == {} and grammar.long == {}


def test_long_declarations_as_sequence_or_mapping_agree():
    from_list = Grammar.from_spec('', ['first', 'second:', 'third:;'])
    from_map = Grammar.from_spec('', {'first': '', 'second': ':', 'third': ':;'})
    assert from_list == from_map
    assert from_list.long['third'] == OptionSpec('third', (':', ';'), long=True)
    assert from_list.long['third'].flag == '--third'


@pytest.mark.parametrize("shortopts", [':a', ';', 'a b', '-a', 'a-'])
def test_malformed_short_spec_fails_fast(shortopts):
    with pytest.raises(GrammarSpecError):
        Grammar.from_spec(shortopts)


def test_marker_without_option_is_reported_as_such():
    with pytest.raises(GrammarSpecError) as exc:
        Grammar.from_spec(':a')
    assert exc.value.token == ':'
    assert "without a preceding option" in str(exc.value)


@pytest.mark.parametrize("longopts", [[''], [':first'], ['fir st'], ['--first'], {'sec': 'ond:'}, {'first': ':x'}])
def test_malformed_long_declaration_fails_fast(longopts):
    with pytest.raises(GrammarSpecError):
        Grammar.from_spec('', longopts)


def test_long_options_as_single_string_is_rejected():
    with pytest.raises(GrammarSpecError):
        Grammar.from_spec('', 'second:')


def test_non_string_short_spec_is_rejected():
    with pytest.raises(GrammarSpecError):
        Grammar.from_spec(None)


@pytest.mark.parametrize("shortopts, longopts", [('aa', ()), ('ab:a', ()), ('', ['first', 'first:'])])
def test_duplicate_declarations_are_rejected(shortopts, longopts):
    with pytest.raises(GrammarSpecError) as exc:
        Grammar.from_spec(shortopts, longopts)
    assert "declared more than once" in str(exc.value)


def test_classify_splits_dashes_from_name():
    assert classify('value') == ('value', 'value')
    assert classify('-a') == ('short', 'a')
    assert classify('--name') == ('long', 'name')
    assert classify('-') == ('short', '')
    assert classify('--') == ('long', '')


def test_lookup_only_recognizes_declared_options():
    grammar = Grammar.from_spec('ab:', ['second:'])
    assert grammar.lookup('-b') is grammar.short['b']
    assert grammar.lookup('--second') is grammar.long['second']
    assert grammar.lookup('-ab') is None
    assert grammar.lookup('--sec') is None
    assert grammar.lookup('-second') is None
    assert grammar.lookup('b') is None


@pytest.mark.parametrize("declaration, expected", [
    ('a', 0), ('a:', 1), ('a;', 1), ('a::', 2), ('a:;;', 3), ('a;:', 1), ('a:;:', 2), ('a;;', 2),
])
def test_max_values_follows_chaining_rule(declaration, expected):
    spec = Grammar.from_spec(declaration).short['a']
    assert spec.max_values == expected


def test_chaining_rule():
    assert Arity.chains(Arity.REQUIRED, Arity.REQUIRED)
    assert Arity.chains(Arity.REQUIRED, Arity.OPTIONAL)
    assert Arity.chains(Arity.OPTIONAL, Arity.OPTIONAL)
    assert not Arity.chains(Arity.OPTIONAL, Arity.REQUIRED)


def test_grammar_str_roundtrips_declarations():
    grammar = Grammar.from_spec('ab:', ['second::'])
    assert str(grammar) == 'ab: --second::'
