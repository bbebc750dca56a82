"""Tests for input classification and value extractors."""

import numpy as np
import pytest

from poissonvar.core.classify import classify_input
from poissonvar.core.config import VarianceConfig
from poissonvar.core.constants import InputKind
from poissonvar.core.extractors import AccessorExtractor, PathExtractor, RawExtractor, select_extractor
from poissonvar.core.matrix import matrix


@pytest.mark.parametrize(
    "value, kind",
    [
        (5, InputKind.SCALAR),
        (0.5, InputKind.SCALAR),
        (np.nan, InputKind.SCALAR),
        (np.float32(1.0), InputKind.SCALAR),
        (np.array(3.0), InputKind.SCALAR),
        ([1, 2], InputKind.SEQUENCE),
        ((1, 2), InputKind.SEQUENCE),
        ([], InputKind.SEQUENCE),
        (np.zeros(3), InputKind.TYPED_BUFFER),
        (np.zeros((2, 2, 2)), InputKind.TYPED_BUFFER),
        (np.zeros((2, 2)), InputKind.MATRIX),
        (matrix((2, 2)), InputKind.MATRIX),
        (True, InputKind.INVALID),
        (None, InputKind.INVALID),
        ("5", InputKind.INVALID),
        ({}, InputKind.INVALID),
        (len, InputKind.INVALID),
        ({1, 2}, InputKind.INVALID),
    ],
)
def test_classify_input(value, kind):
    assert classify_input(value) is kind


def test_accessor_takes_priority_over_path():
    extractor = select_extractor(VarianceConfig(accessor=lambda d, i: d, path="x"))
    assert isinstance(extractor, AccessorExtractor)


def test_path_extractor_selected_without_accessor():
    extractor = select_extractor(VarianceConfig(path="x/1", sep="/"))
    assert isinstance(extractor, PathExtractor)
    assert extractor.keys == ("x", "1")
    assert extractor.in_place


def test_raw_extractor_by_default():
    extractor = select_extractor(VarianceConfig())
    assert isinstance(extractor, RawExtractor)
    assert not extractor.in_place


def test_accessor_receives_element_and_index():
    seen = []
    extractor = AccessorExtractor(lambda d, i: seen.append((d, i)) or d["v"])
    assert extractor.extract({"v": 3}, 7) == 3
    assert seen == [({"v": 3}, 7)]


def test_path_extractor_writes_nested_field():
    extractor = PathExtractor("x.1", ".")
    element = {"x": [9, 2]}
    out = [element]

    assert extractor.extract(element, 0) == 2
    extractor.write(out, 0, element, 5)
    assert element == {"x": [9, 5]}
    assert out[0] is element
