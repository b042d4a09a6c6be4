"""Shared fixtures: recording stand-ins for the GL color entry points."""

import pytest


class Recorder:
    """Callable that remembers every argument tuple it was called with."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        return self.result

    @property
    def last_args(self):
        return self.calls[-1][0]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def boundary():
    from compat import install_color_boundary

    return install_color_boundary(Recorder(), Recorder())
