"""Unit tests for network endpoint checks."""

import pytest
import requests
import responses

from hardhat_config.exceptions import EndpointError, MalformedConfigError
from hardhat_config.rpc import fetch_chain_id, verify_chain_id
from hardhat_config.types import NetworkProfile

RPC_URL = "http://test-rpc.example.com"


class TestFetchChainId:
    """Test the fetch_chain_id function."""

    @responses.activate
    def test_parses_hex_chain_id(self):
        """Test that the hex eth_chainId result is decoded."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0x106a"},
            status=200,
        )

        assert fetch_chain_id(RPC_URL) == 4202

    @responses.activate
    def test_sends_eth_chain_id_request(self):
        """Test the JSON-RPC request body."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0x7a"},
            status=200,
        )

        fetch_chain_id(RPC_URL)

        assert len(responses.calls) == 1
        body = responses.calls[0].request.body
        assert b'"method": "eth_chainId"' in body
        assert b'"params": []' in body

    @responses.activate
    def test_http_error_raises(self):
        """Test that a non-200 status raises EndpointError."""
        responses.add(responses.POST, RPC_URL, status=503)

        with pytest.raises(EndpointError, match="503"):
            fetch_chain_id(RPC_URL)

    @responses.activate
    def test_rpc_error_raises(self):
        """Test that an RPC error payload raises EndpointError."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "nope"}},
            status=200,
        )

        with pytest.raises(EndpointError, match="RPC error"):
            fetch_chain_id(RPC_URL)

    @responses.activate
    def test_missing_result_raises(self):
        """Test that a response without result raises EndpointError."""
        responses.add(responses.POST, RPC_URL, json={"jsonrpc": "2.0", "id": 1}, status=200)

        with pytest.raises(EndpointError):
            fetch_chain_id(RPC_URL)

    @responses.activate
    def test_non_json_response_raises(self):
        """Test that a non-JSON body raises EndpointError."""
        responses.add(responses.POST, RPC_URL, body="<html>", status=200)

        with pytest.raises(EndpointError, match="not JSON"):
            fetch_chain_id(RPC_URL)

    @responses.activate
    def test_network_error_raises(self):
        """Test that transport errors are wrapped in EndpointError."""
        responses.add(
            responses.POST, RPC_URL, body=requests.ConnectionError("connection refused")
        )

        with pytest.raises(EndpointError, match="Network error"):
            fetch_chain_id(RPC_URL)


class TestVerifyChainId:
    """Test the verify_chain_id function."""

    @responses.activate
    def test_matching_chain_id(self):
        """Test that a matching chain ID is returned."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0x106a"},
            status=200,
        )
        profile = NetworkProfile(name="lisk-sepolia", url=RPC_URL, chain_id=4202)

        assert verify_chain_id(profile) == 4202

    @responses.activate
    def test_undeclared_chain_id_accepts_any(self):
        """Test that profiles without chainId accept whatever the endpoint reports."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0x7a"},
            status=200,
        )
        profile = NetworkProfile(name="fuse", url=RPC_URL)

        assert verify_chain_id(profile) == 122

    @responses.activate
    def test_mismatch_raises(self):
        """Test that a different chain ID is a configuration error."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0x1"},
            status=200,
        )
        profile = NetworkProfile(name="lisk-sepolia", url=RPC_URL, chain_id=4202)

        with pytest.raises(MalformedConfigError, match="chainId is 4202"):
            verify_chain_id(profile)
