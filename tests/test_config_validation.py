import pytest
import yaml
from csvframe.config import RunConfig, validate_config, load_config
from csvframe.exceptions import ConfigValidationError

def test_valid_config():
    config = {
        'source': 'datasets/weather_forecast_data.csv',
        'delimiter': ', ',
        'detailed': True,
        'head_rows': 3,
        'seed': 11,
    }
    # Should not raise
    validate_config(config)

def test_missing_required_keys():
    config = {
        'delimiter': ',',
        # 'source' missing
    }
    with pytest.raises(ValueError) as excinfo:
        validate_config(config)
    assert 'Missing required config keys' in str(excinfo.value)

def test_unknown_keys():
    with pytest.raises(ConfigValidationError) as excinfo:
        validate_config({'source': 'a.csv', 'target_column': 'x'})
    assert 'target_column' in str(excinfo.value)

@pytest.mark.parametrize('key, value', [
    ('delimiter', ''),
    ('head_rows', -1),
    ('sample_rows', 'five'),
    ('max_rows', -3),
    ('detailed', 'yes'),
    ('log_level', 'LOUD'),
])
def test_invalid_values(key, value):
    with pytest.raises(ConfigValidationError):
        validate_config({'source': 'a.csv', key: value})

def test_non_mapping_config():
    with pytest.raises(ConfigValidationError):
        validate_config(['source'])

def test_defaults():
    config = RunConfig.from_dict({'source': 'a.csv'})
    assert config.delimiter == ','
    assert config.detailed is False
    assert config.head_rows == 5
    assert config.max_rows is None
    assert config.logging_level == 20

def test_load_config(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text(yaml.safe_dump({'source': 'weather.csv', 'detailed': True, 'log_level': 'debug'}))
    config = load_config(str(path))
    assert config.source == 'weather.csv'
    assert config.detailed is True
    assert config.logging_level == 10

def test_load_empty_config(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('')
    with pytest.raises(ConfigValidationError):
        load_config(str(path))
