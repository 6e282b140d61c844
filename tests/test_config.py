import ipaddress

from tcplane.config import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_HOST,
    DEFAULT_LISTEN_PORT,
    DEFAULT_SOCKET_ADDR,
    ServerConfig,
    SocketAddr,
    print_error_handle,
)


def test_default_socket_addr_string():
    built = SocketAddr("0.0.0.0", 0)
    assert str(built) == "0.0.0.0:0"
    assert str(DEFAULT_SOCKET_ADDR) == str(built)


def test_socket_addr_ipv4_string_uses_host_and_port():
    addr = SocketAddr("127.0.0.1", 8080)
    assert str(addr) == "127.0.0.1:8080"


def test_socket_addr_ipv6_string_is_bracketed():
    assert str(SocketAddr("::1", 8080)) == "[::1]:8080"


def test_socket_addr_ip_property():
    assert SocketAddr("127.0.0.1", 1).ip == ipaddress.ip_address("127.0.0.1")


def test_server_config_defaults():
    config = ServerConfig()
    assert config.host == DEFAULT_HOST == "0.0.0.0"
    assert config.port == DEFAULT_LISTEN_PORT == 60000
    assert config.buffer_size == DEFAULT_BUFFER_SIZE == 512_000
    assert config.error_handle is print_error_handle


def test_print_error_handle_writes_to_stderr(capsys):
    print_error_handle("something failed")
    captured = capsys.readouterr()
    assert captured.err == "something failed\n"
    assert captured.out == ""