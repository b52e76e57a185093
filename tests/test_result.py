"""Tests for check_result."""

import logging

import pytest

from salt_pipeline.core import check_result
from salt_pipeline.core.result import is_failed, iter_resources
from salt_pipeline.exceptions import SaltApiError, SaltStateError


class TestIsFailed:
    """Tests for is_failed."""

    def test_true_result(self):
        assert is_failed({"result": True}) is False

    def test_false_result(self):
        assert is_failed({"result": False}) is True

    def test_none_result(self):
        assert is_failed({"result": None}) is True

    def test_missing_result(self):
        assert is_failed({"changes": {}}) is True

    def test_string_true(self):
        assert is_failed({"result": "true"}) is False

    def test_other_string(self):
        assert is_failed({"result": "false"}) is True
        assert is_failed({"result": "True"}) is True

    def test_non_mapping(self):
        assert is_failed("Rendering SLS 'base:ntp' failed") is True


class TestIterResources:
    """Tests for iter_resources."""

    def test_mapping_yields_values(self):
        assert iter_resources({"a": {"result": True}}) == [{"result": True}]

    def test_list_yields_items(self):
        assert iter_resources(["error one", "error two"]) == ["error one", "error two"]

    def test_scalar_yields_itself(self):
        assert iter_resources("No matching sls found") == ["No matching sls found"]


class TestCheckResult:
    """Tests for check_result."""

    def test_successful_result(self, state_result):
        check_result(state_result)  # Should not raise

    def test_failed_state_raises(self, failed_state_result):
        with pytest.raises(SaltStateError) as exc_info:
            check_result(failed_state_result)

        error = exc_info.value
        assert error.node == "cmp01"
        assert error.resource["comment"] == "Source file salt://motd not found"
        assert "Salt state on node cmp01 failed" in str(error)

    def test_empty_entry_raises(self):
        with pytest.raises(SaltApiError, match="empty response"):
            check_result({"return": [{}]})

    def test_missing_return_raises(self):
        with pytest.raises(SaltApiError):
            check_result({"status": "ok"})

    def test_render_error_list_fails(self):
        result = {"return": [{"ctl01": ["Rendering SLS 'base:ntp' failed: mapping values"]}]}
        with pytest.raises(SaltStateError) as exc_info:
            check_result(result)
        assert exc_info.value.node == "ctl01"

    def test_string_true_result_passes(self):
        result = {"return": [{"ctl01": {"state": {"result": "true", "changes": {}}}}]}
        check_result(result)

    def test_no_fail_logs_instead(self, failed_state_result, caplog):
        with caplog.at_level(logging.ERROR):
            check_result(failed_state_result, fail_on_error=False)

        assert "Salt state on node cmp01 failed" in caplog.text

    def test_no_fail_reports_every_failure(self, caplog):
        result = {
            "return": [
                {
                    "cmp01": {"a": {"result": False}},
                    "cmp02": {"b": {"result": False}},
                },
                {},
            ]
        }
        with caplog.at_level(logging.ERROR):
            check_result(result, fail_on_error=False)

        assert "node cmp01" in caplog.text
        assert "node cmp02" in caplog.text
        assert "empty response" in caplog.text

    def test_null_return_raises(self):
        with pytest.raises(SaltApiError, match="malformed response"):
            check_result({"return": None})

    def test_non_list_return_raises(self):
        with pytest.raises(SaltApiError):
            check_result({"return": {"ctl01": {"a": {"result": True}}}})

    def test_non_dict_response_raises(self):
        with pytest.raises(SaltApiError):
            check_result([{"ctl01": {}}])

    def test_null_return_logged_without_fail(self, caplog):
        with caplog.at_level(logging.ERROR):
            check_result({"return": None}, fail_on_error=False)
        assert "malformed response" in caplog.text
