import dataclasses

import pytest

from livehls.domain.entities.stream import SelectionConstraint, StreamCandidate


def test_candidate_defaults_and_frozen():
    c = StreamCandidate()
    assert c.url == "" and c.height == 0 and c.bitrate == 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.height = 720  # type: ignore[misc]


@pytest.mark.parametrize(
    "target, minimum, expected",
    [
        (720, 480, SelectionConstraint(720, 480)),
        (None, None, SelectionConstraint(None, 0)),
        (0, 0, SelectionConstraint(None, 0)),
        (-360, -1, SelectionConstraint(None, 0)),
        ("720", "480", SelectionConstraint(None, 0)),
        (True, True, SelectionConstraint(None, 0)),
    ],
)
def test_constraint_from_raw_normalizes(target, minimum, expected):
    assert SelectionConstraint.from_raw(target, minimum) == expected
