"""Tests for seed canonicalization and domain normalization."""

import pytest
from models.records import FirmSeed, FirmContacts, MappedContact
from utils.domain import normalize_domain, same_host, base_url_for


DOMAIN_CASES = [
    {"id": "scheme_www_slash", "value": "https://www.example.com/", "expected": "example.com"},
    {"id": "bare", "value": "example.com", "expected": "example.com"},
    {"id": "uppercase_www", "value": "WWW.EXAMPLE.COM", "expected": "example.com"},
    {"id": "http_with_path", "value": "http://example.com/our-people?x=1", "expected": "example.com"},
    {"id": "whitespace", "value": "  example.com  ", "expected": "example.com"},
    {"id": "subdomain_kept", "value": "https://law.example.com", "expected": "law.example.com"},
    {"id": "empty", "value": "", "expected": ""},
]


class TestDomain:

    @pytest.mark.parametrize("case", DOMAIN_CASES, ids=lambda x: x["id"])
    def test_normalize_domain(self, case):
        assert normalize_domain(case["value"]) == case["expected"]

    def test_base_url(self):
        assert base_url_for("https://www.acme.example/") == "https://acme.example"

    def test_same_host_ignores_www(self):
        assert same_host("https://www.acme.example/people/x", "https://acme.example")
        assert not same_host("https://acme.example.evil.com/people/x", "https://acme.example")
        assert not same_host("not a url", "https://acme.example")


SEED_CASES = [
    {
        "id": "canonical",
        "record": {"firm": "Acme LLP", "domain": "acme.example", "source": "ingest", "exposureScore": 92},
        "expected": {"firm": "Acme LLP", "domain": "acme.example", "source": "ingest", "exposure_score": 92},
    },
    {
        "id": "name_and_website",
        "record": {"name": "Acme LLP", "website": "https://www.acme.example/about"},
        "expected": {"firm": "Acme LLP", "domain": "acme.example", "source": None, "exposure_score": None},
    },
    {
        "id": "explicit_domain_wins_over_website",
        "record": {"firm": "Acme LLP", "domain": "acme.example", "website": "https://other.example"},
        "expected": {"firm": "Acme LLP", "domain": "acme.example", "source": None, "exposure_score": None},
    },
    {
        "id": "firm_wins_over_name",
        "record": {"firm": "Acme LLP", "name": "Acme", "domain": "https://acme.example/"},
        "expected": {"firm": "Acme LLP", "domain": "acme.example", "source": None, "exposure_score": None},
    },
    {
        "id": "non_numeric_score_dropped",
        "record": {"firm": "Acme LLP", "domain": "acme.example", "exposureScore": "high"},
        "expected": {"firm": "Acme LLP", "domain": "acme.example", "source": None, "exposure_score": None},
    },
    {
        "id": "boolean_score_dropped",
        "record": {"firm": "Acme LLP", "domain": "acme.example", "exposureScore": True},
        "expected": {"firm": "Acme LLP", "domain": "acme.example", "source": None, "exposure_score": None},
    },
    {
        "id": "nan_score_dropped",
        "record": {"firm": "Acme LLP", "domain": "acme.example", "exposureScore": float("nan")},
        "expected": {"firm": "Acme LLP", "domain": "acme.example", "source": None, "exposure_score": None},
    },
    {
        "id": "infinite_score_dropped",
        "record": {"firm": "Acme LLP", "domain": "acme.example", "exposureScore": float("-inf")},
        "expected": {"firm": "Acme LLP", "domain": "acme.example", "source": None, "exposure_score": None},
    },
]

UNUSABLE_SEEDS = [
    {"id": "no_name", "record": {"domain": "acme.example"}},
    {"id": "no_domain", "record": {"firm": "Acme LLP"}},
    {"id": "undotted_domain", "record": {"firm": "Acme LLP", "domain": "localhost"}},
    {"id": "blank_name", "record": {"firm": "   ", "domain": "acme.example"}},
    {"id": "not_a_dict", "record": ["Acme LLP", "acme.example"]},
]


class TestFirmSeed:

    @pytest.mark.parametrize("case", SEED_CASES, ids=lambda x: x["id"])
    def test_from_record(self, case):
        seed = FirmSeed.from_record(case["record"])
        for field, value in case["expected"].items():
            assert getattr(seed, field) == value

    @pytest.mark.parametrize("case", UNUSABLE_SEEDS, ids=lambda x: x["id"])
    def test_unusable_records(self, case):
        assert FirmSeed.from_record(case["record"]) is None


class TestFirmContacts:

    def test_defaults_from_seed(self):
        seed = FirmSeed.from_record({"firm": "Acme LLP", "domain": "acme.example"})
        record = FirmContacts.for_seed(seed)
        assert record.source == "unknown"
        assert record.exposure_score == 100
        assert record.contacts == []

    def test_wire_format_is_camel_case(self):
        seed = FirmSeed.from_record({"firm": "Acme LLP", "domain": "acme.example", "exposureScore": 71.5})
        contact = MappedContact(name="Jane Doe", role="Partner", source_url="https://acme.example/people/jane",
                                evidence_text="Jane Doe Partner", confidence=0.9)

        wire = FirmContacts.for_seed(seed, [contact]).to_wire()

        assert wire == {
            "firm": "Acme LLP",
            "domain": "acme.example",
            "source": "unknown",
            "exposureScore": 71.5,
            "contacts": [{
                "name": "Jane Doe",
                "role": "Partner",
                "sourceUrl": "https://acme.example/people/jane",
                "evidenceText": "Jane Doe Partner",
                "confidence": 0.9,
            }],
        }
