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

import histexpand.context
import histexpand.exception
import histexpand.modifier as m
import histexpand.tokenizer

from test_base import fail, check_match


def check(text, steps, expected):
    check_match(m.apply_modifiers(text, steps), expected)


def test_paths():
    check('a/b/c.txt', [m.StripHead()], 'a/b')
    check('a/b/c.txt', [m.StripTail()], 'c.txt')
    check('a/b/c.txt', [m.StripExtension()], 'txt')
    check('a/b/c.txt', [m.StripBase()], 'a/b/c')


def test_path_edge_cases():
    check('c.txt', [m.StripHead()], '')
    check('c.txt', [m.StripTail()], 'c.txt')
    check('a/b', [m.StripExtension()], '')
    check('a.d/b', [m.StripExtension()], '')
    check('a.d/b', [m.StripBase()], 'a.d/b')
    check('a.tar.gz', [m.StripBase()], 'a.tar')
    check('a.tar.gz', [m.StripBase(), m.StripBase()], 'a')
    check('/usr/lib/x.so', [m.StripHead(), m.StripHead()], '/usr')


def test_quote():
    for text in ('abc', 'a b', "it's here", '', '$HOME "x"'):
        quoted = m.apply_modifiers(text, [m.Quote()])
        check_match(len(histexpand.tokenizer.tokenize(quoted)), 1)
    check('abc', [m.Quote()], 'abc')
    check('a b', [m.Quote()], "'a b'")


def test_remove_one_word():
    check('cp -r src dest', [m.RemoveOneWord()], '-r src dest')
    check('cp  "a b" c', [m.RemoveOneWord()], '"a b" c')
    check('ls', [m.RemoveOneWord()], '')
    check('cp -r src dest', [m.RemoveOneWord(), m.RemoveOneWord()], 'src dest')


def test_global_apply():
    check('/a/b.txt /c/d.txt', [m.GlobalApply(m.StripTail())], 'b.txt d.txt')
    check('/a/b.txt /c/d.txt', [m.GlobalApply(m.StripBase())], '/a/b /c/d')
    check('/a/b.txt', [m.GlobalApply(m.StripHead())], '/a')
    # Without g, the modifier applies to the text as a whole.
    check('/a/b.txt /c/d.txt', [m.StripBase()], '/a/b.txt /c/d')


def test_substitute():
    check('foo foo', [m.Substitute('foo', 'bar')], 'bar foo')
    check('foo foo', [m.Substitute('foo', 'bar', True)], 'bar bar')
    check('foo', [m.Substitute('foo', '&-&')], 'foo-foo')
    check('foo', [m.Substitute('foo', '\\&')], '&')
    check('abc', [m.Substitute('x', 'y')], 'abc')
    check('a.b', [m.Substitute('.', '*')], 'a*b')


def test_print_only():
    context = histexpand.context.initial()
    assert not context.print_only
    text, context = m.apply_steps('x', [m.PrintOnly()], context)
    check_match(text, 'x')
    assert context.print_only


def test_repeat_substitution():
    check('aaa', [m.Substitute('a', 'b'), m.RepeatSubstitution()], 'bba')
    check('aaa', [m.Substitute('a', 'b'), m.RepeatSubstitution(True)], 'bbb')
    check('aaa', [m.Substitute('a', 'b'), m.Substitute('', 'c')], 'bca')
    text, context = m.apply_steps('xyz', [m.Substitute('y', 'Y')], histexpand.context.initial())
    check_match(context.substitution, histexpand.context.Substitution('y', 'Y'))
    for steps in ([m.RepeatSubstitution()], [m.Substitute('', 'x')]):
        try:
            m.apply_modifiers('abc', steps)
            fail()
        except histexpand.exception.NoPriorSubstitution:
            pass


def test_context_not_modified():
    context = histexpand.context.initial()
    m.apply_steps('abc', [m.Substitute('a', 'b'), m.PrintOnly()], context)
    check_match(context, histexpand.context.initial())


def check_parse(text, steps, end, position=0):
    check_match(m.parse_modifiers(text, position), (steps, end))


def check_parse_error(text):
    try:
        m.parse_modifiers(text, 0)
        fail()
    except histexpand.exception.ModifierSyntaxError:
        pass


def test_parse():
    check_parse('!!:h:t rest', [m.StripHead(), m.StripTail()], 6, 2)
    check_parse(':r:e:p:q:x', [m.StripBase(), m.StripExtension(), m.PrintOnly(), m.Quote(), m.RemoveOneWord()], 10)
    check_parse(':gt', [m.GlobalApply(m.StripTail())], 3)
    check_parse(':&:g&', [m.RepeatSubstitution(), m.RepeatSubstitution(True)], 5)
    check_parse('abc', [], 0)
    check_parse(': x', [], 0)
    check_parse(':', [], 0)


def test_parse_substitute():
    check_parse(':s/a/b/', [m.Substitute('a', 'b')], 7)
    check_parse(':s/a/b/:h', [m.Substitute('a', 'b'), m.StripHead()], 9)
    check_parse(':gs|x|y', [m.Substitute('x', 'y', True)], 7)
    check_parse(':s/a\\/b/c/', [m.Substitute('a/b', 'c')], 10)
    check_parse(':s^old^new^', [m.Substitute('old', 'new')], 11)
    check_parse(':s/a/b c d', [m.Substitute('a', 'b c d')], 10)
    check_parse(':s//x/', [m.Substitute('', 'x')], 6)


def test_parse_errors():
    for text in (':z', ':s', ':s ', ':s/abc', ':gp', ':g', ':gz', ':1'):
        check_parse_error(text)
