# -*- coding: utf-8 -*-
"""Location: ./tests/unit/testbackend/utils/test_case_insensitive.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for CaseInsensitiveDict.
"""

# Third-Party
import pytest

# First-Party
from testbackend.utils.case_insensitive import CaseInsensitiveDict


def test_lookup_ignores_case():
    d = CaseInsensitiveDict({"Content-Type": "json"})
    assert d["content-type"] == "json"
    assert d["CONTENT-TYPE"] == "json"
    assert "content-TYPE" in d


def test_iteration_keeps_original_case():
    d = CaseInsensitiveDict({"Home": "/root", "PATH": "/bin"})
    assert list(d) == ["Home", "PATH"]
    assert d.to_dict() == {"Home": "/root", "PATH": "/bin"}


def test_last_write_wins_for_case_variants():
    d = CaseInsensitiveDict()
    d["path"] = "a"
    d["PATH"] = "b"
    assert len(d) == 1
    assert d.to_dict() == {"PATH": "b"}


def test_delete_ignores_case():
    d = CaseInsensitiveDict({"Key": 1})
    del d["KEY"]
    assert len(d) == 0
    with pytest.raises(KeyError):
        d["key"]


def test_get_with_default():
    assert CaseInsensitiveDict().get("missing", "x") == "x"


def test_repr():
    assert repr(CaseInsensitiveDict({"A": 1})) == "CaseInsensitiveDict({'A': 1})"
