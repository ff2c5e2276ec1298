"""
Тесты загрузки и проверки документа
"""

import json
import textwrap

import httpx
import pytest

from sdkmaker.internal.errors import ErrorKind, GenerationError
from sdkmaker.internal.io import ACCEPT_HEADER, HttpFetcher
from sdkmaker.internal.parser.loader import load, parse_content
from sdkmaker.internal.parser.validator import assert_valid, validate
from sdkmaker.internal.types.spec import InputKind, RawInput
from sdkmaker.internal.utils.url import is_valid_url

SWAGGER_YAML = textwrap.dedent(
    """\
    swagger: '2.0'
    info:
      title: Test API
      version: 1.0.0
    paths:
      /test:
        get:
          operationId: getTest
          tags:
            - TestController
    """
)


def _mock_fetcher(handler):
    return HttpFetcher(transport=httpx.MockTransport(handler))


class TestParseContent:
    """Тесты разбора JSON/YAML"""

    def test_json(self):
        result = parse_content(json.dumps({"openapi": "3.0.0", "paths": {}}))
        assert result == {"openapi": "3.0.0", "paths": {}}

    def test_yaml(self):
        result = parse_content(SWAGGER_YAML)
        assert result["swagger"] == "2.0"
        assert "/test" in result["paths"]

    def test_invalid_content_names_both_formats(self):
        with pytest.raises(GenerationError) as exc_info:
            parse_content("invalid content")

        error = exc_info.value
        assert error.kind is ErrorKind.CONTENT_PARSING
        assert error.details["attempted_formats"] == ["JSON", "YAML"]
        assert error.category == "Content Parsing Error"
        assert "JSON or YAML" in str(error)

    def test_scalar_json_is_returned_as_is(self):
        assert parse_content("123") == 123
        assert parse_content("[1, 2]") == [1, 2]

    def test_broken_yaml(self):
        with pytest.raises(GenerationError) as exc_info:
            parse_content("key: [unclosed")
        assert exc_info.value.kind is ErrorKind.CONTENT_PARSING


class TestValidator:
    """Тесты структурной проверки"""

    @pytest.mark.parametrize(
        "doc",
        [
            {"swagger": "2.0"},
            {"openapi": "3.0.0"},
            {"info": {}},
            {"paths": {}},
        ],
    )
    def test_version_markers(self, doc):
        assert validate(doc) is True

    def test_no_markers(self):
        assert validate({"foo": "bar"}) is False
        assert validate(["openapi"]) is False

    def test_assert_valid_raises_validation_error(self):
        with pytest.raises(GenerationError) as exc_info:
            assert_valid({"foo": "bar"})
        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.severity == "Warning"


class TestRawInput:
    """Тесты определения источника"""

    def test_detect_url(self):
        assert RawInput.detect("https://api.example.com/docs").kind is InputKind.URL

    def test_detect_path(self, tmp_path):
        spec_file = tmp_path / "spec.yaml"
        spec_file.write_text(SWAGGER_YAML, encoding="utf-8")
        assert RawInput.detect(str(spec_file)).kind is InputKind.PATH

    def test_detect_inline(self):
        assert RawInput.detect(SWAGGER_YAML).kind is InputKind.INLINE

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("https://api.example.com/docs", True),
            ("http://localhost:3000/api-json", True),
            ("http://127.0.0.1:8000/openapi.json", True),
            ("ftp://example.com/spec.json", False),
            ("not a url", False),
            ('{"openapi": "3.0.0"}', False),
            ("https://-bad-.com", False),
        ],
    )
    def test_is_valid_url(self, value, expected):
        assert is_valid_url(value) is expected

    def test_is_valid_url_options(self):
        assert is_valid_url("http://localhost:3000", allow_localhost=False) is False
        assert is_valid_url("http://10.0.0.1/spec", allow_ip=False) is False
        assert is_valid_url("api.example.com/docs", require_protocol=False) is True


class TestLoad:
    """Тесты загрузки документа"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [None, "", "   ", 42])
    async def test_invalid_input(self, value):
        with pytest.raises(GenerationError) as exc_info:
            await load(value)
        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.method_name == "load"

    @pytest.mark.asyncio
    async def test_inline_json(self):
        doc = await load('{"openapi": "3.0.0", "paths": {}}')
        assert doc["openapi"] == "3.0.0"

    @pytest.mark.asyncio
    async def test_inline_yaml(self):
        doc = await load(SWAGGER_YAML)
        assert doc["paths"]["/test"]["get"]["operationId"] == "getTest"

    @pytest.mark.asyncio
    async def test_file(self, tmp_path):
        spec_file = tmp_path / "spec.json"
        spec_file.write_text(json.dumps({"openapi": "3.0.0", "paths": {}}), encoding="utf-8")

        doc = await load(RawInput(kind=InputKind.PATH, value=str(spec_file)))
        assert doc["openapi"] == "3.0.0"

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        with pytest.raises(GenerationError) as exc_info:
            await load(RawInput(kind=InputKind.PATH, value=str(tmp_path / "missing.json")))
        assert exc_info.value.kind is ErrorKind.VALIDATION

    @pytest.mark.asyncio
    async def test_invalid_structure(self):
        with pytest.raises(GenerationError) as exc_info:
            await load('{"hello": "world"}')
        assert exc_info.value.kind is ErrorKind.VALIDATION

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["42", "[1, 2]", '"openapi"'])
    async def test_non_object_json_is_rejected_by_validator(self, content):
        with pytest.raises(GenerationError) as exc_info:
            await load(content)
        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.method_name == "parse"

    @pytest.mark.asyncio
    async def test_url_yaml_mislabeled_as_json(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(
                200, text=SWAGGER_YAML, headers={"Content-Type": "application/json"}
            )

        doc = await load("https://api.example.com/docs", fetcher=_mock_fetcher(handler))

        assert doc["swagger"] == "2.0"
        assert requests[0].headers["Accept"] == ACCEPT_HEADER

    @pytest.mark.asyncio
    async def test_url_http_error(self):
        fetcher = _mock_fetcher(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(GenerationError) as exc_info:
            await load("https://api.example.com/docs", fetcher=fetcher)

        error = exc_info.value
        assert error.kind is ErrorKind.NETWORK
        assert error.method_name == "fetch_from_url"
        assert error.details["url"] == "https://api.example.com/docs"

    @pytest.mark.asyncio
    async def test_url_transport_error_is_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(GenerationError) as exc_info:
            await load("https://api.error.com/docs", fetcher=_mock_fetcher(handler))

        assert exc_info.value.kind is ErrorKind.NETWORK
        assert len(calls) == 1
