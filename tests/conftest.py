"""Shared test fixtures."""

import pytest


# ── Payload Builders ─────────────────────────────────────────────────────

def _link(record_id: str, link_type: str = 'Entry') -> dict:
    return {'sys': {'type': 'Link', 'linkType': link_type, 'id': record_id}}


def _entry(record_id: str, content_type: str, fields: dict, **sys) -> dict:
    return {
        'sys': {
            'id': record_id,
            'type': 'Entry',
            'contentType': {'sys': {'type': 'Link', 'linkType': 'ContentType', 'id': content_type}},
            **sys,
        },
        'fields': fields,
    }


def _file(url: str, content_type: str = 'image/png', size: int = 10, image: dict | None = None) -> dict:
    details: dict = {'size': size}
    if image is not None:
        details['image'] = image
    return {'url': url, 'contentType': content_type, 'details': details}


def _asset(record_id: str, fields: dict, **sys) -> dict:
    return {'sys': {'id': record_id, 'type': 'Asset', **sys}, 'fields': fields}


class FakeClient:
    """Stands in for ContentfulClient; records every query."""

    def __init__(self, payload: dict, locales: dict | None = None):
        self.payload = payload
        self.locales = locales or {'items': [{'code': 'en-US', 'default': True}]}
        self.calls: list[tuple[str, dict]] = []

    def query(self, path: str, params: dict) -> dict:
        self.calls.append((path, params))
        return self.payload

    def get_locales(self) -> dict:
        return self.locales


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def link():
    return _link


@pytest.fixture
def make_entry():
    return _entry


@pytest.fixture
def make_asset():
    return _asset


@pytest.fixture
def make_file():
    return _file


@pytest.fixture
def fake_client():
    """Build a FakeClient around a payload."""
    return FakeClient


@pytest.fixture
def locale_catalog():
    return {
        'items': [
            {'code': 'en-US', 'name': 'English', 'default': True},
            {'code': 'fr', 'name': 'French', 'default': False, 'fallbackCode': 'en-US'},
        ],
    }


@pytest.fixture
def sample_payload():
    """One image asset and one post linking to it as its hero."""
    return {
        'items': [
            _entry('e1', 'post', {'title': 'Hi', 'hero': _link('a1', 'Asset')}),
        ],
        'includes': {
            'Asset': [
                _asset('a1', {'file': _file('/x.png', image={'width': 1, 'height': 1})}),
            ],
        },
        'skip': 0,
        'limit': 1000,
        'total': 1,
    }


@pytest.fixture
def multi_locale_payload():
    """A post whose fields are locale maps, with a per-locale hero image."""
    return {
        'items': [
            _entry('e1', 'post', {
                'title': {'en-US': 'Hello', 'fr': 'Bonjour'},
                'subtitle': {'en-US': 'Only English'},
                'hero': {'en-US': _link('a1', 'Asset'), 'fr': _link('a1', 'Asset')},
                'author': {'en-US': _link('p1')},
            }),
        ],
        'includes': {
            'Asset': [
                _asset('a1', {
                    'file': {
                        'en-US': _file('/en.png', image={'width': 2, 'height': 3}),
                        'fr': _file('/fr.png', image={'width': 4, 'height': 5}),
                    },
                    'description': {'en-US': 'A picture'},
                }, revision=3),
            ],
            'Entry': [
                _entry('p1', 'person', {'name': {'en-US': 'Ada', 'fr': 'Ada L.'}}),
            ],
        },
        'skip': 0,
        'limit': 1000,
        'total': 1,
    }
