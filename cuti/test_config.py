#!/usr/bin/env python3
"""
Tests for config.py
"""

import json

import pytest

from cuti.config import DEFAULT_CONFIG, load_config


def _write(tmp_path, data):
    path = tmp_path / 'settings.json'
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


def test_defaults():
    config = load_config()

    assert config == DEFAULT_CONFIG
    assert config['timeout'] == 20
    assert config['headless'] is False

    # Callers may change their copy freely
    config['blocked_url_patterns'].append('*.js')
    assert '*.js' not in DEFAULT_CONFIG['blocked_url_patterns']


def test_overrides(tmp_path):
    path = _write(tmp_path, {
        'base_url': 'http://localhost:8000/',
        'timeout': 30,
        'headless': True,
    })

    config = load_config(path)

    assert config['base_url'] == 'http://localhost:8000'
    assert config['timeout'] == 30
    assert config['headless'] is True
    assert config['blocked_resource_types'] == DEFAULT_CONFIG['blocked_resource_types']


def test_unknown_key(tmp_path):
    with pytest.raises(ValueError, match='Unknown config field'):
        load_config(_write(tmp_path, {'retries': 3}))


def test_wrong_types(tmp_path):
    for data in ({'timeout': 'fast'}, {'timeout': True}, {'headless': 'yes'},
                 {'blocked_url_patterns': '*.png'}):
        with pytest.raises(ValueError):
            load_config(_write(tmp_path, data))


def test_non_positive_timeout(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, {'timeout': 0}))


def test_not_an_object(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, ['timeout', 5]))


def test_invalid_json(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{"timeout": ', encoding='utf-8')

    with pytest.raises(ValueError, match='Invalid JSON'):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / 'missing.json')
