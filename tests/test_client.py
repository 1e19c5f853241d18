"""Tests for ContentfulClient and ClientConfig."""

from unittest.mock import Mock

import pytest
import requests

from contentfully.client import (
    ClientConfig,
    ClientConfigError,
    ContentfulClient,
    ContentfulRequestError,
)


@pytest.fixture
def config():
    return ClientConfig(space_id='space1', access_token='token1', timeout=5)


def _response(ok=True, status_code=200, data=None, text=''):
    resp = Mock()
    resp.ok = ok
    resp.status_code = status_code
    resp.text = text
    resp.json.return_value = data if data is not None else {}
    return resp


class TestClientConfig:
    """Tests for environment configuration."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('CONTENTFUL_SPACE_ID', 'abc')
        monkeypatch.setenv('CONTENTFUL_ACCESS_TOKEN', 'secret')
        monkeypatch.setenv('CONTENTFUL_ENVIRONMENT', 'staging')
        monkeypatch.delenv('CONTENTFUL_HOST', raising=False)
        monkeypatch.setenv('CONTENTFUL_TIMEOUT', '12.5')
        config = ClientConfig.from_env()
        assert config.space_id == 'abc'
        assert config.environment == 'staging'
        assert config.timeout == 12.5
        assert config.base_url == 'https://cdn.contentful.com/spaces/abc/environments/staging'

    def test_missing_variables(self, monkeypatch):
        monkeypatch.delenv('CONTENTFUL_SPACE_ID', raising=False)
        monkeypatch.delenv('CONTENTFUL_ACCESS_TOKEN', raising=False)
        with pytest.raises(ClientConfigError, match='CONTENTFUL_SPACE_ID'):
            ClientConfig.from_env()

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv('CONTENTFUL_SPACE_ID', 'abc')
        monkeypatch.setenv('CONTENTFUL_ACCESS_TOKEN', 'secret')
        monkeypatch.setenv('CONTENTFUL_TIMEOUT', 'soon')
        with pytest.raises(ClientConfigError):
            ClientConfig.from_env()


class TestContentfulClient:
    """Tests for HTTP calls made through the session."""

    def test_query_builds_request(self, config):
        session = Mock()
        session.get.return_value = _response(data={'items': []})
        client = ContentfulClient(config, session=session)

        assert client.query('/entries', {'limit': 1}) == {'items': []}
        session.get.assert_called_once_with(
            'https://cdn.contentful.com/spaces/space1/environments/master/entries',
            params={'limit': 1},
            headers={'Authorization': 'Bearer token1'},
            timeout=5,
        )

    def test_get_locales(self, config):
        session = Mock()
        session.get.return_value = _response(data={'items': [{'code': 'en-US'}]})
        client = ContentfulClient(config, session=session)
        assert client.get_locales()['items'][0]['code'] == 'en-US'
        assert session.get.call_args[0][0].endswith('/locales')

    def test_http_error(self, config):
        session = Mock()
        session.get.return_value = _response(ok=False, status_code=404, text='Not found')
        client = ContentfulClient(config, session=session)
        with pytest.raises(ContentfulRequestError) as exc:
            client.query('/entries')
        assert exc.value.status_code == 404
        assert exc.value.path == '/entries'

    def test_connection_error(self, config):
        session = Mock()
        session.get.side_effect = requests.ConnectionError('refused')
        client = ContentfulClient(config, session=session)
        with pytest.raises(ContentfulRequestError) as exc:
            client.query('/entries')
        assert exc.value.status_code is None
