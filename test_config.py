"""
Tests for ScoringConfig loading, validation and the error types.
"""

import logging

import pytest
from pydantic import ValidationError

from readability_core import ConfigError, NodeTree, ScoringConfig, TreeError, get_default_config
from readability_core.logger import get_module_logger, setup_logger
from readability_core.schemas import DEFAULT_TAG_WEIGHTS, ENV_VARS, reset_default_config


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No READABILITY_* variables and an empty working directory for .env lookup."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_default_config()
    yield tmp_path
    reset_default_config()


def test_defaults():
    config = ScoringConfig()
    assert config.tag_weights == DEFAULT_TAG_WEIGHTS
    assert config.class_weight == 25
    assert config.weight_classes is True
    assert config.id_weight_from_class is False
    assert config.parser == 'html5lib'


def test_tag_weights_are_lowercased():
    config = ScoringConfig(tag_weights={'DIV': 7, 'Section': 2})
    assert config.tag_weights == {'div': 7, 'section': 2}


def test_invalid_pattern_rejected():
    with pytest.raises(ValidationError):
        ScoringConfig(positive_pattern='(unclosed')


def test_unknown_parser_rejected():
    with pytest.raises(ValidationError):
        ScoringConfig(parser='regex-soup')


def test_from_env(clean_env, monkeypatch):
    monkeypatch.setenv('READABILITY_WEIGHT_CLASSES', 'false')
    monkeypatch.setenv('READABILITY_CLASS_WEIGHT', '10')
    monkeypatch.setenv('READABILITY_PARSER', 'lxml')

    config = ScoringConfig.from_env(env_file=str(clean_env / 'missing.env'))
    assert config.weight_classes is False
    assert config.class_weight == 10
    assert config.parser == 'lxml'


def test_from_env_reads_dotenv_file(clean_env, monkeypatch):
    env_file = clean_env / '.env'
    env_file.write_text('READABILITY_ID_WEIGHT_FROM_CLASS=true\nREADABILITY_CLASS_WEIGHT=30\n')

    config = ScoringConfig.from_env(env_file=str(env_file))
    assert config.id_weight_from_class is True
    assert config.class_weight == 30


def test_from_env_overrides_win(clean_env, monkeypatch):
    monkeypatch.setenv('READABILITY_CLASS_WEIGHT', '10')
    config = ScoringConfig.from_env(env_file=str(clean_env / 'missing.env'), class_weight=40)
    assert config.class_weight == 40


def test_from_env_invalid_value(clean_env, monkeypatch):
    monkeypatch.setenv('READABILITY_CLASS_WEIGHT', 'lots')
    with pytest.raises(ConfigError) as exc_info:
        ScoringConfig.from_env(env_file=str(clean_env / 'missing.env'))
    assert exc_info.value.field == 'class_weight'
    assert exc_info.value.to_response()['error'] == 'ConfigError'


def test_default_config_is_cached(clean_env):
    first = get_default_config()
    assert get_default_config() is first
    reset_default_config()
    assert get_default_config() is not first


def test_tree_uses_default_config(clean_env, monkeypatch):
    monkeypatch.setenv('READABILITY_WEIGHT_CLASSES', '0')
    tree = NodeTree.from_html('<div class="content">x</div>')
    assert tree.config.weight_classes is False
    assert tree.find('div').initialize_node().content_score == 5


def test_missing_tree_builder():
    with pytest.raises(TreeError) as exc_info:
        NodeTree.from_html('<p>x</p>', parser='no-such-builder', config=ScoringConfig())
    assert exc_info.value.details['parser'] == 'no-such-builder'


def test_setup_logger_file(tmp_path):
    log_file = tmp_path / 'scoring.log'
    logger = setup_logger(name='readability_core_test', level=logging.DEBUG, log_file=str(log_file))
    logger.debug('initialized div')
    for handler in logger.handlers:
        handler.flush()
    assert 'initialized div' in log_file.read_text()

    # Second call reuses handlers and only changes the level
    again = setup_logger(name='readability_core_test', level=logging.ERROR)
    assert again is logger
    assert len(again.handlers) == 2
    assert again.level == logging.ERROR


def test_module_logger_name():
    assert get_module_logger('tree').name == 'readability_core.tree'
