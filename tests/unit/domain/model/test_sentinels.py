"""Tests for domain/model/sentinels.py and enums.py."""

import copy
import pickle

from sigensure.domain.model.enums import ValidationMode
from sigensure.domain.model.sentinels import UNDEFINED


class TestUndefined:
    """Tests for UNDEFINED sentinel."""

    def test_repr(self) -> None:
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_is_falsy(self) -> None:
        assert not UNDEFINED

    def test_is_not_none(self) -> None:
        assert UNDEFINED is not None

    def test_identity_survives_copy_and_pickle(self) -> None:
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


class TestValidationMode:
    """Tests for ValidationMode."""

    def test_exact_rejects_extra_keys(self) -> None:
        assert ValidationMode.EXACT.allow_extra_keys is False

    def test_minimum_allows_extra_keys(self) -> None:
        assert ValidationMode.MINIMUM.allow_extra_keys is True
