"""Tests for SRV based endpoint resolution"""

import asyncio

import dns.resolver
import pytest

from minestat_es import NoRecordsError, ServiceRecord
from minestat_es import resolver


class FakeRdata:
    def __init__(self, target, port, priority=0, weight=5):
        self.target = target
        self.port = port
        self.priority = priority
        self.weight = weight


class FakeAnswer:
    def __init__(self, rrset):
        self.rrset = rrset


@pytest.fixture
def srv_lookups(monkeypatch):
    """Replace the SRV lookup; returns the list of names queried and the records to answer with."""
    queried = []
    records = []

    async def fake_resolve_srv(fqdn):
        queried.append(fqdn)
        return list(records)

    monkeypatch.setattr(resolver, "resolve_srv", fake_resolve_srv)
    return queried, records


class TestPrefixWith:
    def test_adds_prefix(self):
        assert resolver.prefix_with("example.com", "_minecraft._tcp.") == "_minecraft._tcp.example.com"

    def test_keeps_existing_prefix(self):
        name = "_minecraft._tcp.example.com"

        assert resolver.prefix_with(name, "_minecraft._tcp.") == name


class TestToAscii:
    def test_ascii_is_unchanged(self):
        assert resolver.to_ascii("mc.example.com") == "mc.example.com"

    def test_internationalized_names(self):
        assert resolver.to_ascii("bücher.example") == "xn--bcher-kva.example"
        assert resolver.to_ascii("_minecraft._tcp.bücher.example") == "_minecraft._tcp.xn--bcher-kva.example"


class TestResolveEndpoint:
    """Test turning a hostname into address and port"""

    def test_no_records(self, srv_lookups):
        with pytest.raises(NoRecordsError) as excinfo:
            asyncio.run(resolver.resolve_endpoint("example.com"))

        assert str(excinfo.value) == "No DNS records found for hostname _minecraft._tcp.example.com"

    def test_single_record(self, srv_lookups):
        queried, records = srv_lookups
        records.append(ServiceRecord("mc.example.com", 25566, 0, 5))

        assert asyncio.run(resolver.resolve_endpoint("example.com")) == ("mc.example.com", 25566)
        assert queried == ["_minecraft._tcp.example.com"]

    def test_prefix_is_not_doubled(self, srv_lookups):
        queried, records = srv_lookups
        records.append(ServiceRecord("mc.example.com", 25565))

        asyncio.run(resolver.resolve_endpoint("_minecraft._tcp.example.com"))

        assert queried == ["_minecraft._tcp.example.com"]

    def test_random_pick(self, srv_lookups, monkeypatch):
        _, records = srv_lookups
        records.extend(
            [
                ServiceRecord("a.example.com", 25565),
                ServiceRecord("b.example.com", 25566),
                ServiceRecord("c.example.com", 25567),
            ]
        )
        picked_from = []

        def choice(seq):
            picked_from.append(list(seq))
            return seq[-1]

        monkeypatch.setattr(resolver.random, "choice", choice)

        assert asyncio.run(resolver.resolve_endpoint("example.com")) == ("c.example.com", 25567)
        assert picked_from == [records]

    def test_lookup_errors_propagate(self, monkeypatch):
        async def failing_resolve_srv(fqdn):
            raise dns.resolver.NXDOMAIN()

        monkeypatch.setattr(resolver, "resolve_srv", failing_resolve_srv)

        with pytest.raises(dns.resolver.NXDOMAIN):
            asyncio.run(resolver.resolve_endpoint("missing.example.com"))


class TestResolveSrv:
    """Test the dnspython lookup"""

    def test_records(self, monkeypatch):
        calls = []

        async def fake_resolve(qname, rdtype, raise_on_no_answer=True):
            calls.append((qname, rdtype, raise_on_no_answer))
            return FakeAnswer([FakeRdata("mc.example.com.", 25565, 10, 20)])

        monkeypatch.setattr(resolver.dns.asyncresolver, "resolve", fake_resolve)

        records = asyncio.run(resolver.resolve_srv("_minecraft._tcp.example.com"))

        assert records == [ServiceRecord("mc.example.com", 25565, 10, 20)]
        assert calls == [("_minecraft._tcp.example.com", "SRV", False)]

    def test_no_answer(self, monkeypatch):
        async def fake_resolve(qname, rdtype, raise_on_no_answer=True):
            return FakeAnswer(None)

        monkeypatch.setattr(resolver.dns.asyncresolver, "resolve", fake_resolve)

        assert asyncio.run(resolver.resolve_srv("_minecraft._tcp.example.com")) == []
