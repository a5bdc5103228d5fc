from __future__ import annotations

import betslip


def test_docstring_lists_every_export():
    missing = [name for name in betslip.__all__ if name not in betslip.__doc__]
    assert missing == []


def test_exports_resolve():
    for name in betslip.__all__:
        assert getattr(betslip, name) is not None
