"""Tests for the calling API client - HTTP is mocked at requests.request."""
from unittest.mock import MagicMock, patch

import pytest
import requests

from crm_admin.exceptions import ConfigurationError, VapiAPIError
from crm_admin.services.vapi_service import VapiService


def fake_response(status_code=200, body=None, content=b"x"):
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    resp.text = str(body)
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


class TestVapiServiceSetup:
    def test_missing_key(self, no_vapi_env):
        with pytest.raises(ConfigurationError) as exc:
            VapiService()
        assert exc.value.setting == "VAPI_API_KEY"

    def test_key_from_config(self, vapi_env):
        service = VapiService()
        assert service.headers["Authorization"] == "Bearer test-key-1234"
        assert service.base_url == "https://vapi.test"

    def test_explicit_key_wins(self, vapi_env):
        service = VapiService(api_key="other", base_url="https://x.test/")
        assert service.headers["Authorization"] == "Bearer other"
        assert service.base_url == "https://x.test"


@patch("crm_admin.services.vapi_service.requests.request")
class TestVapiRequests:
    def test_list_assistants(self, mock_request, vapi_env):
        mock_request.return_value = fake_response(body=[{"id": "a1", "name": "Sales"}])

        assistants = VapiService().list_assistants()

        assert assistants == [{"id": "a1", "name": "Sales"}]
        method, url = mock_request.call_args[0]
        assert (method, url) == ("GET", "https://vapi.test/assistant")
        assert mock_request.call_args[1]["timeout"] == 30

    def test_wrapped_list(self, mock_request, vapi_env):
        mock_request.return_value = fake_response(body={"results": [{"id": "p1"}]})
        assert VapiService().list_phone_numbers() == [{"id": "p1"}]

    def test_list_calls_params(self, mock_request, vapi_env):
        mock_request.return_value = fake_response(body=[])
        VapiService().list_calls(limit=5, assistant_id="a1")
        assert mock_request.call_args[1]["params"] == {"limit": 5, "assistantId": "a1"}

    def test_http_error(self, mock_request, vapi_env):
        mock_request.return_value = fake_response(401, {"message": "Invalid Key"})
        with pytest.raises(VapiAPIError) as exc:
            VapiService().get_call("c1")
        assert exc.value.status_code == 401
        assert exc.value.response_data == {"message": "Invalid Key"}

    def test_network_error(self, mock_request, vapi_env):
        mock_request.side_effect = requests.exceptions.ConnectionError("boom")
        with pytest.raises(VapiAPIError):
            VapiService().list_assistants()

    def test_non_json_body(self, mock_request, vapi_env):
        mock_request.return_value = fake_response(body=ValueError("no json"))
        with pytest.raises(VapiAPIError):
            VapiService().list_assistants()

    def test_empty_body(self, mock_request, vapi_env):
        mock_request.return_value = fake_response(body=None, content=b"")
        assert VapiService().list_calls() == []

    def test_get_call_requires_id(self, mock_request, vapi_env):
        with pytest.raises(VapiAPIError):
            VapiService().get_call("")
        mock_request.assert_not_called()

    def test_check_resources_reports_each_side(self, mock_request, vapi_env):
        mock_request.side_effect = [
            fake_response(body=[{"id": "a1"}, {"id": "a2"}]),
            fake_response(403, {"message": "forbidden"}),
        ]

        results = VapiService().check_resources()

        assert results["assistants"] == {"success": True, "count": 2, "data": [{"id": "a1"}, {"id": "a2"}]}
        assert results["phone_numbers"]["success"] is False
        assert results["phone_numbers"]["count"] == 0
        assert results["phone_numbers"]["error"]["status_code"] == 403
