"""Tests for the Google + zkLogin authenticator."""

import json

import pytest
import respx
from httpx import Response

from api import FortemClient
from auth import ZkLoginAuthenticator
from config.network import NetworkConfig
from exceptions import ProverError
from signer import ZkLoginSigner
from zklogin import gen_address_seed, jwt_to_address
from conftest import envelope, fake_poseidon, make_jwt

PROOF = {
    "proofPoints": {
        "a": ["1", "2", "1"],
        "b": [["3", "4"], ["5", "6"], ["1", "0"]],
        "c": ["7", "8", "1"],
    },
    "issBase64Details": {"value": "wiaXNzIjoiaHR0cHM6Ly9hY2NvdW50cy5nb29nbGUuY29tIiw", "indexMod4": 1},
    "headerBase64": "eyJhbGciOiJSUzI1NiJ9",
}


@pytest.fixture
def network(api_url: str) -> NetworkConfig:
    return NetworkConfig(
        name="testnet",
        api_url=api_url,
        prover_url="http://prover.test",
        sui_network="testnet",
        rpc_url="http://rpc.test",
    )


class FakeGoogle:
    """Stands in for the browser flow and records the nonce it was given."""

    def __init__(self) -> None:
        self.nonces = []
        self.jwt = None

    async def __call__(self, nonce: str, **kwargs) -> str:
        self.nonces.append(nonce)
        self.jwt = make_jwt({
            "iss": "https://accounts.google.com",
            "sub": "1234",
            "aud": "client-id",
            "nonce": nonce,
        })
        return self.jwt


async def fixed_epoch(rpc_url: str) -> int:
    assert rpc_url == "http://rpc.test"
    return 100


def make_authenticator(network: NetworkConfig, google: FakeGoogle) -> ZkLoginAuthenticator:
    return ZkLoginAuthenticator(
        network=network,
        poseidon=fake_poseidon,
        client_id="client-id",
        get_id_token=google,
        fetch_epoch=fixed_epoch,
    )


def mock_salt(api_url: str, router=respx) -> respx.Route:
    return router.post(f"{api_url}/api/v1/auth/salt").mock(
        return_value=Response(200, json=envelope({
            "salt": "42",
            "sub": "1234",
            "aud": "client-id",
            "iss": "https://accounts.google.com",
        }))
    )


@pytest.mark.asyncio
@respx.mock
async def test_login_produces_zklogin_identity(api_url: str, network: NetworkConfig) -> None:
    google = FakeGoogle()
    salt_route = mock_salt(api_url)
    prover_route = respx.post("http://prover.test/v1").mock(return_value=Response(200, json=PROOF))
    login_route = respx.post(f"{api_url}/api/v1/auth/login").mock(
        return_value=Response(200, json=envelope({"accessToken": "zk-token"}))
    )

    result = await make_authenticator(network, google).login(FortemClient(api_url))

    expected_address = jwt_to_address(fake_poseidon, google.jwt, "42")
    assert result.access_token == "zk-token"
    assert result.identity.address == expected_address
    assert len(google.nonces[0]) == 27

    assert json.loads(salt_route.calls.last.request.content) == {"jwt": google.jwt}

    proof_request = json.loads(prover_route.calls.last.request.content)
    assert proof_request["jwt"] == google.jwt
    assert proof_request["salt"] == "42"
    assert proof_request["maxEpoch"] == "110"
    assert proof_request["keyClaimName"] == "sub"

    assert json.loads(login_route.calls.last.request.content) == {
        "walletAddress": expected_address,
        "provider": "GOOGLE",
        "sub": "1234",
    }

    signer = result.identity.signer
    assert isinstance(signer, ZkLoginSigner)
    assert signer.get_address() == expected_address
    assert signer.state.max_epoch == 110
    assert signer.state.address_seed == str(gen_address_seed(fake_poseidon, "42", "sub", "1234", "client-id"))
    assert proof_request["extendedEphemeralPublicKey"] == str(
        int.from_bytes(signer.ephemeral_keypair.sui_public_key_bytes(), "big")
    )


@pytest.mark.asyncio
@pytest.mark.respx(assert_all_called=False)
async def test_prover_failure_aborts_login(api_url: str, network: NetworkConfig, respx_mock) -> None:
    mock_salt(api_url, respx_mock)
    respx_mock.post("http://prover.test/v1").mock(return_value=Response(503, text="busy"))
    login_route = respx_mock.post(f"{api_url}/api/v1/auth/login")

    with pytest.raises(ProverError) as exc_info:
        await make_authenticator(network, FakeGoogle()).login(FortemClient(api_url))

    assert exc_info.value.status_code == 503
    assert exc_info.value.body == "busy"
    assert not login_route.called


@pytest.mark.asyncio
@respx.mock
async def test_each_attempt_uses_a_fresh_ephemeral_key(api_url: str, network: NetworkConfig) -> None:
    google = FakeGoogle()
    mock_salt(api_url)
    respx.post("http://prover.test/v1").mock(return_value=Response(200, json=PROOF))
    respx.post(f"{api_url}/api/v1/auth/login").mock(
        return_value=Response(200, json=envelope({"accessToken": "zk-token"}))
    )
    authenticator = make_authenticator(network, google)

    first = await authenticator.login(FortemClient(api_url))
    second = await authenticator.login(FortemClient(api_url))

    assert google.nonces[0] != google.nonces[1]
    assert first.identity.signer.ephemeral_keypair is not second.identity.signer.ephemeral_keypair
