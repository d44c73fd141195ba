from linksocket.config import LinkConditionerConfig
from linksocket.demo import get_server_address, get_shared_config


def test_server_address():
    assert get_server_address() == ("127.0.0.1", 14191)


def test_shared_config_uses_average_condition():
    config = get_shared_config()
    assert config.link_condition_config == LinkConditionerConfig.average_condition()


def test_shared_config_uses_default_endpoint_path():
    assert get_shared_config().rtc_endpoint_path == "new_rtc_session"