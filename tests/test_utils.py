from __future__ import annotations

from oleum.utils import format_local_date, positive_number


def test_positive_number():
    assert positive_number("2.5") == 2.5
    assert positive_number(500) == 500.0
    assert positive_number(0) is None
    assert positive_number(-1) is None
    assert positive_number(True) is None
    assert positive_number("") is None
    assert positive_number(None) is None


def test_format_local_date():
    assert format_local_date("2024-10-20") == "Oct 20, 2024"
    assert format_local_date("2024-10-20T08:30:00+00:00") == "Oct 20, 2024"
    assert format_local_date("someday") == "someday"
