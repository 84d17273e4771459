"""
Tests for address validation and scan mechanics.
"""

from __future__ import annotations

import random

import pytest

from hacksim.skills.network import (
    COMMON_PORTS,
    PORT_SERVICES,
    SERVER_NAMES,
    is_private_address,
    is_valid_address,
    parse_address,
    random_address,
    scan_target,
)


class TestParseAddress:
    def test_parses_octets(self):
        assert parse_address("192.168.1.20") == (192, 168, 1, 20)

    @pytest.mark.parametrize(
        "address",
        ["", "1.2.3", "1.2.3.4.5", "a.b.c.d", "256.1.1.1", "1.2.3.4\n", " 1.2.3.4", "1..2.3"],
    )
    def test_rejects_malformed(self, address: str):
        assert parse_address(address) is None


class TestIsValidAddress:
    """Tests for the reserved-range aware address check."""

    @pytest.mark.parametrize(
        "address",
        ["192.168.1.1", "10.0.0.5", "172.16.0.254", "8.8.8.8", "223.255.255.254"],
    )
    def test_accepts_routable_and_private(self, address: str):
        assert is_valid_address(address)

    @pytest.mark.parametrize(
        "address",
        [
            "0.1.2.3",  # this network
            "127.0.0.1",  # loopback
            "169.254.10.1",  # link local
            "192.0.2.1",  # TEST-NET-1
            "198.51.100.7",  # TEST-NET-2
            "203.0.113.9",  # TEST-NET-3
            "224.0.0.1",  # multicast
            "240.0.0.1",
            "255.255.255.255",
        ],
    )
    def test_rejects_reserved_ranges(self, address: str):
        assert not is_valid_address(address)

    @pytest.mark.parametrize("address", ["999.1.1.1", "1.2.3", "hello", ""])
    def test_rejects_malformed(self, address: str):
        assert not is_valid_address(address)

    def test_neighbours_of_reserved_ranges_are_valid(self):
        assert is_valid_address("169.253.1.1")
        assert is_valid_address("192.0.3.1")
        assert is_valid_address("126.255.255.255")


class TestIsPrivateAddress:
    @pytest.mark.parametrize("address", ["10.1.2.3", "172.16.0.1", "172.31.9.9", "192.168.0.1"])
    def test_private(self, address: str):
        assert is_private_address(address)

    @pytest.mark.parametrize("address", ["172.32.0.1", "8.8.8.8", "nonsense"])
    def test_not_private(self, address: str):
        assert not is_private_address(address)


class TestRandomAddress:
    def test_generated_targets_are_valid_private_hosts(self):
        rng = random.Random(7)
        for _ in range(200):
            address = random_address(rng)
            assert is_valid_address(address)
            assert is_private_address(address)
            host = int(address.rsplit(".", 1)[1])
            assert 1 <= host <= 254


class TestScanTarget:
    """Tests for the randomized scan result."""

    def test_result_shape(self):
        rng = random.Random(11)
        for _ in range(100):
            result = scan_target("10.0.0.1", rng)

            assert 1 <= len(result.ports) <= 5
            assert len(set(result.ports)) == len(result.ports)
            assert set(result.ports) <= set(COMMON_PORTS)
            assert result.services == [PORT_SERVICES[port] for port in result.ports]
            assert result.name in SERVER_NAMES
            assert 1 <= result.security <= 5

    def test_seeded_scans_are_reproducible(self):
        first = scan_target("10.0.0.1", random.Random(3))
        second = scan_target("10.0.0.1", random.Random(3))
        assert first == second
