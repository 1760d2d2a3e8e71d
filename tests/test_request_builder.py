"""Tests del request builder (sin red)."""

from __future__ import annotations

import json
from urllib.parse import parse_qsl, urlsplit

import pytest

from questionit.core.domain.forms import Attachment, MultipartForm, UrlEncodedForm, stringify
from questionit.core.domain.models import NotificationType
from questionit.core.domain.request import BodyEncoding
from questionit.core.services.request_builder import PREFIX, build_request


def _query(url: str) -> list[tuple[str, str]]:
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


class TestStringify:
    def test_booleans_are_lowercase(self):
        assert stringify(True) == "true"
        assert stringify(False) == "false"

    def test_numbers(self):
        assert stringify(42) == "42"
        assert stringify(2.0) == "2"
        assert stringify(2.5) == "2.5"

    def test_enum_uses_value(self):
        assert stringify(NotificationType.FOLLOW_BACK) == "follow-back"


class TestQueryParams:
    @pytest.mark.parametrize("method", ["GET", "DELETE", "HEAD", "get"])
    def test_params_go_to_query_string(self, method):
        request = build_request(method, "users/find", params={"q": "bob", "count": 5, "safe": False})

        assert request.method == method.upper()
        assert request.body is None
        assert request.encoding is None
        assert _query(request.url) == [("q", "bob"), ("count", "5"), ("safe", "false")]

    def test_none_values_are_omitted(self):
        request = build_request("GET", "questions/timeline", params={"since": None, "until": "abc", "count": None})

        assert _query(request.url) == [("until", "abc")]
        assert "since" not in request.url

    def test_empty_query_is_not_appended(self):
        request = build_request("GET", "questions/timeline", params={"since": None})

        assert request.url == PREFIX + "questions/timeline"

    def test_no_params(self):
        request = build_request("GET", "users/logged")

        assert request.url == "https://api.questionit.space/users/logged"
        assert "Content-Type" not in request.headers

    def test_prebuilt_forms_are_accepted(self):
        form = MultipartForm()
        form.append("question", "12")
        request = build_request("DELETE", "questions", params=form)
        assert _query(request.url) == [("question", "12")]

        encoded = UrlEncodedForm([("a", "1"), ("b", "x y")])
        request = build_request("GET", "users/find", params=encoded)
        assert request.url.endswith("?a=1&b=x+y")

    def test_attachment_rejected_in_query(self):
        with pytest.raises(TypeError):
            build_request("GET", "users/find", params={"file": Attachment(b"data")})


class TestBodyEncoding:
    def test_plain_mapping_becomes_json(self):
        params = {"content": "hello", "to": "42", "in_reply_to": None, "poll_id": None}
        request = build_request("POST", "questions", params=params)

        assert request.encoding is BodyEncoding.JSON
        assert request.header("content-type") == "application/json"
        assert json.loads(request.body) == {"content": "hello", "to": "42"}

    def test_json_keeps_native_types(self):
        request = build_request("POST", "polls", params={"options": ["A", "B"], "flag": True, "n": 3})

        assert json.loads(request.body) == {"options": ["A", "B"], "flag": True, "n": 3}

    def test_multipart_form_becomes_urlencoded(self):
        form = MultipartForm()
        form.append("name", "Ana")
        form.append("visible", True)
        form.append("count", 3)
        request = build_request("POST", "users/blocked_words", params=form)

        assert request.encoding is BodyEncoding.FORM
        assert request.header("Content-Type") == "application/x-www-form-urlencoded"
        assert isinstance(request.body, str)
        assert parse_qsl(request.body) == [("name", "Ana"), ("visible", "true"), ("count", "3")]

    def test_urlencoded_form_passes_through(self):
        form = UrlEncodedForm([("a", "1")])
        request = build_request("PUT", "users/settings", params=form)

        assert request.encoding is BodyEncoding.FORM
        assert request.body == "a=1"

    def test_attachment_rejected_outside_multipart_endpoints(self):
        with pytest.raises(TypeError):
            build_request("POST", "questions", params={"picture": Attachment(b"\x89PNG")})

    @pytest.mark.parametrize("endpoint", ["questions/answer", "users/profile"])
    def test_multipart_endpoints_from_mapping(self, endpoint):
        picture = Attachment(b"\x89PNG", filename="a.png")
        params = {"answer": "yes", "question": 7, "post_on_twitter": False, "missing": None, "picture": picture}
        request = build_request("POST", endpoint, params=params)

        assert request.encoding is BodyEncoding.MULTIPART
        assert isinstance(request.body, MultipartForm)
        assert len(request.body) == 4
        assert request.body.names() == ["answer", "question", "post_on_twitter", "picture"]
        assert request.body.get("question") == "7"
        assert request.body.get("post_on_twitter") == "false"
        assert request.body.get("picture") is picture

    def test_multipart_endpoint_from_urlencoded_form(self):
        form = UrlEncodedForm([("answer", "ok"), ("question", "1")])
        request = build_request("POST", "questions/answer", params=form)

        assert isinstance(request.body, MultipartForm)
        assert list(request.body) == [("answer", "ok"), ("question", "1")]

    def test_multipart_form_passes_through_on_multipart_endpoint(self):
        form = MultipartForm()
        form.append("name", "Ana")
        request = build_request("POST", "users/profile", params=form)

        assert request.body is form

    def test_multipart_never_sets_content_type(self):
        request = build_request(
            "POST",
            "users/profile",
            params={"name": "Ana"},
            headers={"content-type": "multipart/form-data"},
        )

        assert request.header("Content-Type") is None

    def test_computed_content_type_replaces_caller_value(self):
        request = build_request("POST", "questions", params={"content": "x"}, headers={"content-type": "text/plain"})

        assert request.headers == {"Content-Type": "application/json"}


class TestAuthorization:
    def test_stored_token_is_used_by_default(self):
        request = build_request("GET", "users/logged", token="abc")
        assert request.header("Authorization") == "Bearer abc"

    def test_auth_true_uses_stored_token(self):
        request = build_request("GET", "users/logged", auth=True, token="abc")
        assert request.header("Authorization") == "Bearer abc"

    def test_auth_false_never_sends_token(self):
        request = build_request("POST", "apps/token", params={"key": "k"}, auth=False, token="abc")
        assert request.header("Authorization") is None

    def test_auth_string_overrides_stored_token(self):
        request = build_request("GET", "users/logged", auth="xyz", token="abc")

        assert request.header("Authorization") == "Bearer xyz"
        assert [k for k in request.headers if k.lower() == "authorization"] == ["Authorization"]

    def test_auth_string_without_stored_token(self):
        request = build_request("GET", "users/logged", auth="xyz")
        assert request.header("Authorization") == "Bearer xyz"

    def test_no_token_no_header(self):
        request = build_request("GET", "users/logged")
        assert request.header("Authorization") is None

    def test_extra_headers_are_kept(self):
        request = build_request("GET", "users/logged", headers={"X-Trace": "1"}, token="abc")
        assert request.headers == {"X-Trace": "1", "Authorization": "Bearer abc"}


def test_custom_base_url():
    request = build_request("GET", "users/logged", base_url="http://localhost:5000/")
    assert request.url == "http://localhost:5000/users/logged"
