"""Tests for playlist_player.document: defaults, validation issues, YAML."""

import pytest

from playlist_player.document import (
    DEFAULT_DOCUMENT,
    DocumentError,
    dump_yaml,
    format_issues,
    load_yaml,
    schema_hint,
    validate_document,
)
from playlist_player.timeparse import parse_time


class TestValidateDocument:

    def test_defaults_applied(self):
        doc, issues = validate_document({'media': [{'url': 'a.mp4', 'title': 'A'}]})
        assert issues == []
        assert doc.autoplay is True
        assert doc.loop == -1
        assert doc.speed is None
        assert doc.controls is None
        assert doc.on_stop.go_back is None
        item = doc.media[0]
        assert item.type == 'video'
        assert item.start == '0:00'
        assert item.end is None
        assert item.loop is None

    def test_on_stop_authored_name(self):
        doc, _ = validate_document({'onStop': {'goBack': True}, 'media': []})
        assert doc.on_stop.go_back is True

    def test_empty_end_allowed(self):
        doc, issues = validate_document({'media': [{'url': 'a', 'title': 'A', 'end': ''}]})
        assert issues == []
        assert doc.media[0].end == ''

    def test_unknown_keys_ignored(self):
        doc, issues = validate_document({'media': [], 'theme': 'dark'})
        assert issues == []
        assert doc is not None

    def test_null_title_rejected(self):
        doc, issues = validate_document({'title': None, 'media': []})
        assert doc is None
        assert issues[0]['path'] == '/title'

    def test_missing_url_reports_path(self):
        doc, issues = validate_document({'media': [{'title': 'A'}]})
        assert doc is None
        assert [i['path'] for i in issues] == ['/media/0/url']
        assert issues[0]['message']

    def test_missing_media(self):
        doc, issues = validate_document({'title': 'x'})
        assert doc is None
        assert issues[0]['path'] == '/media'

    def test_bad_type(self):
        doc, issues = validate_document({'media': [{'type': 'gif', 'url': 'a', 'title': 'A'}]})
        assert doc is None
        assert issues[0]['path'] == '/media/0/type'

    def test_not_a_mapping(self):
        doc, issues = validate_document(['media'])
        assert doc is None
        assert issues == [{'path': '/', 'message': 'must be object'}]

    def test_default_document_is_valid(self):
        doc, issues = validate_document(DEFAULT_DOCUMENT)
        assert issues == []
        assert doc.autoplay is False
        assert doc.media[0].loop == 1

    def test_format_issues(self):
        text = format_issues([
            {'path': '/media/0/url', 'message': 'Field required'},
            {'path': '/loop', 'message': 'bad'},
        ])
        assert text == '/media/0/url Field required, /loop bad'


class TestYaml:

    def test_load(self):
        data = load_yaml('title: T\nmedia:\n  - url: a.mp4\n    title: A\n')
        assert data == {'title': 'T', 'media': [{'url': 'a.mp4', 'title': 'A'}]}

    def test_load_syntax_error(self):
        with pytest.raises(DocumentError):
            load_yaml('media: [unclosed')

    def test_dump_keeps_key_order(self):
        text = dump_yaml({'title': 'T', 'autoplay': False, 'media': []})
        assert text.index('title') < text.index('autoplay') < text.index('media')

    def test_schema_hint_mentions_fields(self):
        hint = schema_hint()
        assert 'media' in hint
        assert 'onStop' in hint


class TestUnquotedTimes:
    """YAML 1.1 reads 1:30 as base-60; trim times must still validate."""

    def test_unquoted_start_and_end(self):
        text = 'media:\n  - url: a.mp4\n    title: A\n    start: 1:30\n    end: 1:01:01\n'
        doc, issues = validate_document(load_yaml(text))
        assert issues == []
        item = doc.media[0]
        assert parse_time(item.start) == 90
        assert parse_time(item.end) == 3661

    def test_leading_zero_stays_text(self):
        doc, _ = validate_document(load_yaml('media:\n  - url: a\n    title: A\n    start: 0:05\n'))
        assert doc.media[0].start == '0:05'
        assert parse_time(doc.media[0].start) == 5

    def test_plain_number_start(self):
        doc, issues = validate_document({'media': [{'url': 'a', 'title': 'A', 'start': 12}]})
        assert issues == []
        assert parse_time(doc.media[0].start) == 12
