"""Tests for BoomiApiClient: URL building, auth, and failure normalization."""

import base64
import json
from dataclasses import replace

import httpx

from boomi_deploy_mcp.api_client import ApiFailure, ApiSuccess


def ok_json(request):
    return httpx.Response(200, json={'numberOfResults': 0, 'result': []})


class TestEndpoints:

    def test_endpoint_url_single_slash(self, settings, make_client):
        client, _ = make_client(settings, ok_json)
        assert client.endpoint_url('acct-123/Deployment/query') == (
            'https://api.boomi.com/api/rest/v1/acct-123/Deployment/query'
        )
        assert client.endpoint_url('/acct-123/Component/c1') == (
            'https://api.boomi.com/api/rest/v1/acct-123/Component/c1'
        )

    def test_base_url_without_trailing_slash(self, settings, make_client):
        client, _ = make_client(replace(settings, base_url='http://localhost:9000/api'), ok_json)
        assert client.endpoint_url('x/y') == 'http://localhost:9000/api/x/y'

    def test_account_scoped_endpoints(self, settings, make_client):
        client, _ = make_client(settings, ok_json)
        assert client.deployment_query_endpoint() == 'acct-123/Deployment/query'
        assert client.component_endpoint('abc') == 'acct-123/Component/abc'


class TestCall:

    def test_post_sends_json_body_and_basic_auth(self, settings, make_client):
        client, transport = make_client(settings, ok_json)
        result = client.call('acct-123/Deployment/query', 'POST', {'QueryFilter': {}})

        assert isinstance(result, ApiSuccess)
        assert result.json() == {'numberOfResults': 0, 'result': []}
        assert len(transport.requests) == 1
        request = transport.requests[0]
        assert request.method == 'POST'
        assert str(request.url) == 'https://api.boomi.com/api/rest/v1/acct-123/Deployment/query'
        assert json.loads(request.content) == {'QueryFilter': {}}
        expected = base64.b64encode(b'BOOMI_TOKEN.dev@example.com:secret-token').decode()
        assert request.headers['Authorization'] == f'Basic {expected}'
        assert request.headers['Accept'] == 'application/json'

    def test_get_sends_no_body(self, settings, make_client):
        client, transport = make_client(settings, lambda r: httpx.Response(200, text='<xml/>'))
        result = client.call('acct-123/Component/c1', 'get', {'ignored': True}, accept='application/xml')

        assert isinstance(result, ApiSuccess)
        assert result.body == '<xml/>'
        request = transport.requests[0]
        assert request.method == 'GET'
        assert request.content == b''
        assert request.headers['Accept'] == 'application/xml'

    def test_http_error_becomes_failure(self, settings, make_client):
        client, _ = make_client(settings, lambda r: httpx.Response(500, text='boom'))
        result = client.call('acct-123/Deployment/query', 'POST', {})

        assert isinstance(result, ApiFailure)
        assert result.kind == 'transport'
        assert result.status == 500
        assert result.message == 'Failed to communicate with Boomi API.'
        assert result.details['status'] == 500
        assert result.details['statusText'] == 'Internal Server Error'
        assert result.details['endpoint'] == 'acct-123/Deployment/query'
        assert result.details['message'] == 'Error calling Boomi API'

    def test_network_error_becomes_failure(self, settings, make_client):
        def refuse(request):
            raise httpx.ConnectError('connection refused', request=request)

        client, _ = make_client(settings, refuse)
        result = client.call('acct-123/Deployment/query', 'POST', {})

        assert isinstance(result, ApiFailure)
        assert result.status is None
        assert result.details['statusText'] is None
        assert 'connection refused' in result.details['error']

    def test_timeout_becomes_failure(self, settings, make_client):
        def slow(request):
            raise httpx.ReadTimeout('read timed out', request=request)

        client, _ = make_client(settings, slow)
        result = client.call('acct-123/Component/c1', 'GET')

        assert isinstance(result, ApiFailure)
        assert result.details['error'] == 'Request timed out after 10.0s'

    def test_missing_credentials_skip_network(self, empty_settings, make_client):
        client, transport = make_client(empty_settings, ok_json)
        result = client.call('x/Deployment/query', 'POST', {})

        assert isinstance(result, ApiFailure)
        assert result.kind == 'configuration'
        assert result.message == f'Missing static values. Check {empty_settings.diagnostic_file} for details.'
        assert transport.requests == []

    def test_missing_credentials_without_marker(self, empty_settings, make_client):
        client, _ = make_client(replace(empty_settings, diagnostic_file=None), ok_json)
        result = client.call('x', 'GET')
        assert result.message == 'Missing static values. Check the server log for details.'
