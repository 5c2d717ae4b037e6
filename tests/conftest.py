from pytest import fixture

from simplecalc.machine import Machine
from simplecalc.registry import build_registry


@fixture(scope='session')
def registry():
    '''
    Command table shared by every machine in the run, as in a real session.
    '''
    return build_registry()


@fixture
def machine(registry):
    return Machine(registry=registry)


@fixture
def run(machine):
    '''
    Feed a line to a fresh machine, returning all output lines.
    '''
    def run(line):
        return list(machine.feed(line))
    return run
