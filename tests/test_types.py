from __future__ import annotations

import dataclasses

import pytest

from netorca_sdk import types


@pytest.mark.parametrize(
    "cls",
    [obj for obj in vars(types).values() if dataclasses.is_dataclass(obj)],
    ids=lambda cls: cls.__name__,
)
def test_dataclasses_are_documented(cls: type) -> None:
    # dataclass() fills in a signature-style __doc__ when none is written
    assert cls.__doc__
    assert not cls.__doc__.startswith(f"{cls.__name__}(")
