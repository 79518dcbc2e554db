"""Unit tests for HTTP error mapping."""

import warnings

import pytest

from cinema.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from cinema.interface.error import to_http_exception


class TestToHttpException:
    @pytest.mark.parametrize(
        "error, status_code, key",
        [
            (NotFoundError("Comment", "c1"), 404, "commentNotFound"),
            (NotAuthorizedError("comment", "c1", "u1"), 403, "unauthorized"),
            (ValidationError("empty content"), 422, "validationError"),
            (ValueError("badly formed UUID"), 422, "validationError"),
        ],
    )
    def test_maps_status_and_key(self, error, status_code, key):
        result = to_http_exception(error)

        assert result.status_code == status_code
        assert result.detail["key"] == key

    def test_validation_mapping_emits_no_deprecation_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            result = to_http_exception(ValidationError("too long"))

        assert result.status_code == 422
