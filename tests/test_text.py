from bubblecons.plist import NIL, plist
from bubblecons.sort import bubblesort
from bubblecons.text import render, print_list, parse
from bubblecons.errors import ParseError, BubbleconsError

import io
import sys
import pytest
from pytest import raises

EXAMPLE = [3, 7, 1, 0, 0, 45, 1001, 2, -100]

def test_render():
    assert render(plist(EXAMPLE)) == '3,7,1,0,0,45,1001,2,-100'
    assert render(bubblesort(plist(EXAMPLE))) == '-100,0,0,1,2,3,7,45,1001'
    assert render(plist([5])) == '5'
    assert render(NIL) == ''
    assert render(plist('ab')) == 'a,b'

def test_print_list(capsys):
    print_list(plist(EXAMPLE))
    print_list(NIL)
    assert capsys.readouterr().out == '3,7,1,0,0,45,1001,2,-100\n\n'

def test_print_list_file():
    out = io.StringIO()
    print_list(plist([1, 2]), file=out)
    assert out.getvalue() == '1,2\n'

def test_parse():
    assert parse('3,7,-100') == plist([3, 7, -100])
    assert parse(' 1 , 2,3 \n') == plist([1, 2, 3])
    assert parse('42') == plist([42])
    assert parse('') is NIL
    assert parse('  \n') is NIL
    assert parse(render(plist(EXAMPLE))) == plist(EXAMPLE)

def test_parse_errors():
    with raises(ParseError): parse('1,a,3')
    with raises(ParseError): parse('1,,3')
    with raises(ParseError): parse('1,2,')
    with raises(ParseError): parse('1.5')
    # Only what render writes
    with raises(ParseError): parse('1_000')
    with raises(ParseError): parse('+5')
    with raises(ParseError): parse('- 5')
    with raises(BubbleconsError): parse('x')

    with raises(ParseError) as info:
        parse('1, 2, three')
    assert info.value.position == 2
    assert str(info.value) == "Expected an integer, got 'three'"
    assert info.value.get_info('nums.txt') == "nums.txt:2: Expected an integer, got 'three'"

@pytest.mark.skipif(not hasattr(sys, 'get_int_max_str_digits'),
                    reason='no int/str digit limit')
def test_digit_limit():
    digits = sys.get_int_max_str_digits()
    if digits == 0:
        pytest.skip('digit limit disabled')
    with raises(ValueError): render(plist([10 ** (digits + 1)]))
    with raises(ParseError): parse('1,' + '9' * (digits + 1))
