import logging

import pytest
from pydantic import ValidationError

from proxy_lib import Proxy, ProxyConfig, load_proxy_config
from proxy_lib.logging_config import configure_logging
from tests.helpers import ClassWithMagicMethods


def test_defaults():
    cfg = ProxyConfig()
    assert cfg.catch_all_read == 'universal'
    assert cfg.create_mode == 'initialise_missing'
    assert cfg.log_level is None


def test_load_missing_file_gives_defaults(tmp_path):
    assert load_proxy_config(tmp_path / 'absent.yml') == ProxyConfig()


def test_load_from_yaml(tmp_path):
    path = tmp_path / 'proxy.yml'
    path.write_text('catch_all_read: declared\ncreate_mode: skip_existing\n', encoding='utf-8')
    cfg = load_proxy_config(path)
    assert cfg.catch_all_read == 'declared'
    assert cfg.create_mode == 'skip_existing'
    assert Proxy(ClassWithMagicMethods(), config=cfg).has('anything') is False


def test_invalid_values_rejected(tmp_path):
    path = tmp_path / 'proxy.yml'
    path.write_text('create_mode: overwrite\n', encoding='utf-8')
    with pytest.raises(ValidationError):
        load_proxy_config(path)
    with pytest.raises(ValidationError):
        ProxyConfig(unknown_option=True)


def test_configure_logging_reads_level(tmp_path):
    path = tmp_path / 'proxy.yml'
    path.write_text('log_level: debug\n', encoding='utf-8')
    root = logging.getLogger()
    previous = root.level
    try:
        logger = configure_logging(path)
        assert logger.name == 'proxy_lib.logging_config'
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_configure_logging_falls_back_on_bad_config(tmp_path):
    path = tmp_path / 'proxy.yml'
    path.write_text('create_mode: overwrite\n', encoding='utf-8')
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(path)
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
