# tests/conftest.py
import pytest

from miniparsec.Parsec import ParserState


@pytest.fixture
def initial_state():
    def _make(input_data, offset=0):
        return ParserState(input_data, offset)

    return _make
