'''
Command line interface tests
'''

from io import StringIO

import pytest

from simplecalc import cli
from simplecalc.cli import CLI, InteractiveInput, BANNER


def test_expressions(capsys):
    CLI().run(args=['-e', '10 3 - print', '8 2 log print'])
    assert capsys.readouterr().out == '-7\n3\n'


def test_errors_on_stdout(capsys):
    CLI().run(args=['-e', 'print 1 x'])
    assert capsys.readouterr().out == \
        "'Print' requires a non-empty stack\nUnknown command 'x'\n"


def test_piped_session(capsys, monkeypatch):
    monkeypatch.setattr(cli, 'stdin', StringIO('1 2\n+ print\n'))
    CLI().run(args=[])
    out = capsys.readouterr().out
    assert out == BANNER + '\n' + '3\n' + '\ngoodbye!\n'
    assert 'help' in BANNER


def test_piped_input_is_not_prompted(monkeypatch):
    piped = StringIO('')
    monkeypatch.setattr(cli, 'stdin', piped)
    calc = CLI()
    calc.args = calc.argument_parser.parse_args([])
    assert calc._prompting_input() is piped


def test_explicit_prompt(monkeypatch):
    monkeypatch.setattr(cli, 'stdin', StringIO(''))
    calc = CLI()
    calc.args = calc.argument_parser.parse_args(['-p', '$ '])
    interactive = calc._prompting_input()
    assert isinstance(interactive, InteractiveInput)
    assert interactive.prompt == '$ '


def test_verbose(capsys, monkeypatch):
    err = StringIO()
    monkeypatch.setattr(cli, 'stderr', err)
    CLI().run(args=['-v', '-e', '1 2', '3 +'])
    assert capsys.readouterr().out == ''
    assert err.getvalue() == '2\n1\n5\n1\n'


def test_natural_order(capsys):
    CLI().run(args=['--natural-order', '-e', '10 3 - print'])
    assert capsys.readouterr().out == '7\n'


def test_dump(capsys):
    CLI().run(args=['-D', '-e', '1.5 swap wat'])
    lines = capsys.readouterr().out.splitlines()
    assert lines[1:] == [
        "number\t'1.5'\tNone",
        "command\t'swap'\t2",
        "unknown\t'wat'\tNone",
    ]


def test_raw_grammar(capsys):
    CLI().run(args=['-G', '-e'])
    assert 'inf(?:inity)?' in capsys.readouterr().out


def test_keyboard_interrupt(monkeypatch):
    def interrupted(self):
        raise KeyboardInterrupt
    monkeypatch.setattr(CLI, 'executor', interrupted)
    with pytest.raises(SystemExit) as e:
        CLI().run(args=['-e', '1'])
    assert e.value.code == 1


def test_verbose_empty_stack(capsys, monkeypatch):
    err = StringIO()
    monkeypatch.setattr(cli, 'stderr', err)
    CLI().run(args=['-v', '-e', 'help', '1 print'])
    assert err.getvalue() == ''
