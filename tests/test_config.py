import pytest

from ipku.config import Settings, parse_args


def test_defaults():
    settings = parse_args([])
    assert settings == Settings()
    assert settings.port == '80'
    assert settings.behind_proxy is False
    assert settings.host == '0.0.0.0'
    assert settings.log_level == 'INFO'


def test_flags():
    settings = parse_args(['--port', '8080', '--behind-proxy', '--log-level', 'debug'])
    assert settings.port == '8080'
    assert settings.behind_proxy is True
    assert settings.log_level == 'DEBUG'


def test_single_dash_flags():
    settings = parse_args(['-port=8081', '-behind-proxy'])
    assert settings.port == '8081'
    assert settings.behind_proxy is True


@pytest.mark.parametrize('port', ['http', '-1', '70000', ''])
def test_invalid_port(port):
    with pytest.raises(SystemExit):
        parse_args([f'--port={port}'])


def test_settings_immutable():
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.port = '8080'
