"""Tests for request building."""

import pytest
from simplenet.request import RequestBuilder, HTTPMethod


URL = "https://api.example.com/items"


class TestQueryString:
    def test_absent_params(self):
        assert RequestBuilder.query_string(None) is None

    def test_empty_params(self):
        assert RequestBuilder.query_string({}) is None

    def test_values_escaped_keys_not(self):
        query = RequestBuilder.query_string({"a": "x y", "b": "c&d"})
        assert sorted(query.split("&")) == ["a=x%20y", "b=c%26d"]

    def test_key_left_as_is(self):
        assert RequestBuilder.query_string({"a b": "1"}) == "a b=1"

    def test_reserved_characters(self):
        assert RequestBuilder.query_string({"next": "/a?b=c"}) == "next=%2Fa%3Fb%3Dc"

    def test_non_ascii_value(self):
        assert RequestBuilder.query_string({"name": "é"}) == "name=%C3%A9"

    def test_unencodable_value_does_not_fail(self):
        query = RequestBuilder.query_string({"bad": "\ud800"})
        assert query.startswith("bad=")


class TestBuild:
    def test_empty_url(self):
        assert RequestBuilder.build(HTTPMethod.GET, "", {"q": "shoes"}) is None
        assert RequestBuilder.build(HTTPMethod.POST, "", {"q": "shoes"}) is None

    def test_get_with_params(self):
        request = RequestBuilder.build(HTTPMethod.GET, URL, {"q": "shoes"})
        assert request.url == URL + "?q=shoes"
        assert request.method == HTTPMethod.GET
        assert request.body is None

    @pytest.mark.parametrize("params", [None, {}])
    def test_get_without_params(self, params):
        request = RequestBuilder.build(HTTPMethod.GET, URL, params)
        assert request.url == URL
        assert request.body is None

    @pytest.mark.parametrize("params", [None, {}])
    def test_post_without_params(self, params):
        assert RequestBuilder.build(HTTPMethod.POST, URL, params) is None

    def test_post_with_params(self):
        params = {"a": "x y", "b": "c&d"}
        request = RequestBuilder.build(HTTPMethod.POST, URL, params)
        assert request.url == URL
        assert request.method == HTTPMethod.POST
        assert request.body.decode("utf-8") == RequestBuilder.query_string(params)


class TestHTTPMethod:
    def test_render(self):
        assert str(HTTPMethod.GET) == "GET"
        assert str(HTTPMethod.POST) == "POST"

    def test_parse(self):
        assert HTTPMethod.parse("post") is HTTPMethod.POST

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            HTTPMethod.parse("DELETE")
