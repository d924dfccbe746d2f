from __future__ import annotations

import pytest

from contractflow.shared.utils import coalesce_blank, is_blank


@pytest.mark.parametrize("value", [None, "", " ", "\t\n"])
def test_blank_values(value):
    assert is_blank(value)
    assert coalesce_blank(value, "N/A") == "N/A"


def test_non_blank_value_is_kept_verbatim():
    assert not is_blank(" 4.2 ")
    assert coalesce_blank(" 4.2 ", "N/A") == " 4.2 "
