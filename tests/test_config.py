"""Tests for startup configuration and authenticator selection."""

import os

import pytest

from auth import DirectKeyAuthenticator, ZkLoginAuthenticator, create_authenticator
from config import ConfigLoader, get_network_config
from config.app_config import AuthMode, load_app_config
from exceptions import ConfigurationError

ENV_VARS = [
    "FORTEM_NETWORK",
    "SUI_PRIVATE_KEY",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "ZKLOGIN_POSEIDON",
    "OAUTH_CALLBACK_PORT",
    "OAUTH_CALLBACK_TIMEOUT",
]


@pytest.fixture
def loader(tmp_path, monkeypatch) -> ConfigLoader:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return ConfigLoader(env_path=str(tmp_path / ".env"))


def test_missing_credentials_is_fatal(loader: ConfigLoader) -> None:
    with pytest.raises(ConfigurationError, match="SUI_PRIVATE_KEY is required"):
        load_app_config(loader)


def test_private_key_selects_direct_login(loader: ConfigLoader, monkeypatch, secret_key: str) -> None:
    monkeypatch.setenv("SUI_PRIVATE_KEY", secret_key)

    app_config = load_app_config(loader)

    assert app_config.auth_mode is AuthMode.DIRECT_KEY
    assert app_config.network.name == "testnet"
    assert app_config.network.api_url == "https://testnet-api.fortem.gg"
    assert isinstance(create_authenticator(app_config), DirectKeyAuthenticator)


def test_unknown_network_is_rejected(loader: ConfigLoader, monkeypatch, secret_key: str) -> None:
    monkeypatch.setenv("SUI_PRIVATE_KEY", secret_key)
    monkeypatch.setenv("FORTEM_NETWORK", "devnet")

    with pytest.raises(ConfigurationError, match='got: "devnet"'):
        load_app_config(loader)


def test_network_override_wins(loader: ConfigLoader, monkeypatch, secret_key: str) -> None:
    monkeypatch.setenv("SUI_PRIVATE_KEY", secret_key)
    monkeypatch.setenv("FORTEM_NETWORK", "testnet")

    app_config = load_app_config(loader, network_override="mainnet")

    assert app_config.network == get_network_config("mainnet")


def test_google_login_needs_poseidon(loader: ConfigLoader, monkeypatch) -> None:
    monkeypatch.setenv("GOOGLE_CLIENT_ID", "client-id")

    with pytest.raises(ConfigurationError, match="ZKLOGIN_POSEIDON"):
        load_app_config(loader)


def test_google_login_selects_zklogin(loader: ConfigLoader, monkeypatch) -> None:
    monkeypatch.setenv("GOOGLE_CLIENT_ID", "client-id")
    monkeypatch.setenv("ZKLOGIN_POSEIDON", "conftest:fake_poseidon")
    monkeypatch.setenv("OAUTH_CALLBACK_PORT", "9001")

    app_config = load_app_config(loader)

    assert app_config.auth_mode is AuthMode.ZKLOGIN
    assert app_config.redirect_uri == "http://localhost:9001/callback"
    authenticator = create_authenticator(app_config)
    assert isinstance(authenticator, ZkLoginAuthenticator)
    assert authenticator.callback_port == 9001


def test_invalid_private_key_is_a_configuration_error(loader: ConfigLoader, monkeypatch) -> None:
    monkeypatch.setenv("SUI_PRIVATE_KEY", "suiprivkey1broken")

    with pytest.raises(ConfigurationError, match="SUI_PRIVATE_KEY is invalid"):
        create_authenticator(load_app_config(loader))


def test_unimportable_poseidon_is_a_configuration_error(loader: ConfigLoader, monkeypatch) -> None:
    monkeypatch.setenv("GOOGLE_CLIENT_ID", "client-id")
    monkeypatch.setenv("ZKLOGIN_POSEIDON", "no_such_module_here:poseidon")

    with pytest.raises(ConfigurationError, match="ZKLOGIN_POSEIDON could not be loaded"):
        create_authenticator(load_app_config(loader))


def test_loader_parses_by_default_type(loader: ConfigLoader, monkeypatch) -> None:
    monkeypatch.setenv("OAUTH_CALLBACK_PORT", " 9000 ")
    monkeypatch.setenv("OAUTH_CALLBACK_TIMEOUT", "soon")
    monkeypatch.setenv("GOOGLE_CLIENT_SECRET", "on")

    assert loader.get("OAUTH_CALLBACK_PORT", 8898) == 9000
    assert loader.get("OAUTH_CALLBACK_TIMEOUT", 300.0) == 300.0
    assert loader.get("GOOGLE_CLIENT_SECRET", False) is True
    assert loader.get("GOOGLE_CLIENT_SECRET", None) == "on"


def test_loader_treats_blank_as_unset(loader: ConfigLoader, monkeypatch) -> None:
    monkeypatch.setenv("SUI_PRIVATE_KEY", "   ")
    assert loader.get("SUI_PRIVATE_KEY", None) is None


def test_env_file_does_not_override_environment(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / "fortem.env"
    env_file.write_text("FORTEM_NETWORK=mainnet\nFORTEM_TEST_FILE_ONLY=from-file\n")
    monkeypatch.setenv("FORTEM_NETWORK", "testnet")
    monkeypatch.setenv("FORTEM_ENV_FILE", str(env_file))
    try:
        loader = ConfigLoader()
        assert loader.env_path == env_file
        assert loader.get("FORTEM_NETWORK", "testnet") == "testnet"
        assert loader.get("FORTEM_TEST_FILE_ONLY", None) == "from-file"
    finally:
        os.environ.pop("FORTEM_TEST_FILE_ONLY", None)
