"""Shared builders for blueprint text used across the test modules."""

import pytest

HEADER = [
    "LevelEditor2,Bouwerman,05032024-140709123-Bouwerman-1234567890-2",
    "0,0,0,0,0,0,0,0",
    "invalid track,0,0,0,0,-1",
]


def _block_line(type_id=1, position=(0, 0, 0), rotation=(0, 0, 0), scale=(1, 1, 1), payload=None):
    payload = list(payload or [])
    payload += [0] * (28 - len(payload))
    fields = [type_id, *position, *rotation, *scale, *payload]
    return ",".join(str(f) for f in fields)


@pytest.fixture
def block_line():
    return _block_line


@pytest.fixture
def blueprint_lines():
    def build(*block_lines, header=None):
        return list(header or HEADER) + list(block_lines)
    return build


@pytest.fixture
def header_lines():
    return list(HEADER)
