from __future__ import annotations

import sys
from types import SimpleNamespace

import pytest

from secure_store.domain.secure_context import (
    MISSING,
    SecureContext,
    is_secure_context_shape,
    require_secure_context,
)
from secure_store.errors import InvalidArgumentError


def test_secure_contexts_compare_by_identity() -> None:
    # Two tokens with the same label are still different credentials.
    first = SecureContext("svc")
    second = SecureContext("svc")
    assert first != second
    assert first == first
    assert len({first, second}) == 2


def test_secure_context_repr_does_not_require_label() -> None:
    assert repr(SecureContext("svc")) == "SecureContext('svc')"
    assert repr(SecureContext()).startswith("<SecureContext at 0x")


@pytest.mark.parametrize("candidate", [SecureContext(), {}, [], object(), SimpleNamespace()])
def test_object_shapes_are_accepted(candidate: object) -> None:
    assert is_secure_context_shape(candidate)
    assert require_secure_context(candidate) is candidate


@pytest.mark.parametrize("candidate", [MISSING, None, "", "token", 0, 3.2, 1j, False, b"", bytearray()])
def test_scalars_none_and_missing_are_rejected(candidate: object) -> None:
    assert not is_secure_context_shape(candidate)
    with pytest.raises(InvalidArgumentError):
        require_secure_context(candidate)


@pytest.mark.parametrize(
    "candidate",
    [(), (1, 2), frozenset(), range(3), ..., NotImplemented, type(None), SecureContext, dict, sys],
)
def test_rebuildable_immutables_classes_and_modules_are_rejected(candidate: object) -> None:
    # Interned immutables, singletons, classes and modules can be obtained by anyone, so they are not tokens.
    assert not is_secure_context_shape(candidate)
    with pytest.raises(InvalidArgumentError):
        require_secure_context(candidate)
