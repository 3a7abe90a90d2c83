# This file is part of Histexpand.
#
# Histexpand is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, (or at your
# option) any later version.
#
# Histexpand is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License
# along with Histexpand.  If not, see <https://www.gnu.org/licenses/>.

import histexpand.exception
import histexpand.tokenizer
import histexpand.word

from test_base import fail, check_match

tokenize = histexpand.tokenizer.tokenize
resolve_word = histexpand.word.resolve_word
word_range = histexpand.word.word_range
WordRange = histexpand.word.WordRange

COMMAND = 'cp -r src/a.txt dest'


def check_word(designator, expected, command=COMMAND):
    check_match(resolve_word(tokenize(command), designator), expected)


def check_no_such_word(designator, command=COMMAND):
    try:
        resolve_word(tokenize(command), designator)
        fail()
    except histexpand.exception.NoSuchWord:
        pass


def test_single_words():
    check_word('^', 'cp')
    check_word('0', 'cp')
    check_word('1', '-r')
    check_word('2', 'src/a.txt')
    check_word('$', 'dest')


def test_ranges():
    check_word('*', '-r src/a.txt dest')
    check_word('1-2', '-r src/a.txt')
    check_word('2-', 'src/a.txt dest')
    check_word('2*', 'src/a.txt dest')
    check_word('-1', 'cp -r')
    check_word('0-$', COMMAND)
    check_word('^-$', COMMAND)
    check_word('3-3', 'dest')


def test_word_range():
    check_match(word_range('2-', 4), WordRange(2, 3))
    check_match(word_range('*', 4), WordRange(1, 3))
    assert word_range('$', 4).is_single()
    assert not word_range('1-2', 4).is_single()


def test_bad_designators():
    for designator in ('4', '5', '3-1', '-', '', 'x', '1-x', '$-1'):
        check_no_such_word(designator)


def test_star_needs_arguments():
    check_no_such_word('*', 'ls')
    check_word('*', 'x', 'ls x')


def test_no_words():
    check_no_such_word('0', '')
    check_no_such_word('$', '   ')


def test_percent():
    for designator in ('%', '1-%'):
        try:
            resolve_word(tokenize(COMMAND), designator)
            fail()
        except histexpand.exception.DesignatorNotImplemented:
            pass


def test_grouped_words():
    command = 'echo "a b" (c (d e)) f'
    check_word('1', '"a b"', command)
    check_word('2', '(c (d e))', command)
    check_word('$', 'f', command)


def test_all_words_retokenize():
    for command in ('echo "a b" (c d)   e', 'ls', "  grep -e 'x y'  file  "):
        tokens = tokenize(command)
        all_words = resolve_word(tokens, '0-$')
        check_match([token.text for token in tokenize(all_words)],
                    [token.text for token in tokens])
