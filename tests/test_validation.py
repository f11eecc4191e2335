"""Tests for request field validation."""

from typing import Annotated

import pytest

from akamai_apis import ValidationErrors, validation
from akamai_apis.dns import RecordBody
from akamai_apis.papi import CreateEdgeHostnameRequest, EdgeHostnameCreate, UseCase


class Thing(validation.RequestModel):
    zeta: Annotated[str, validation.rules(validation.required)] = ""
    alpha: Annotated[str | None, validation.rules(validation.required)] = None
    kind: Annotated[str, validation.rules(validation.required, validation.one_of("A", "B"))] = "A"


@pytest.mark.parametrize("value", [None, False, "", 0, 0.0, [], {}, b""])
def test_blank_values(value):
    """Test the zero values treated as missing."""
    assert validation.is_blank(value)


@pytest.mark.parametrize("value", [True, "x", 1, -1, [0], {"a": None}])
def test_present_values(value):
    """Test that non-zero values count as present."""
    assert not validation.is_blank(value)


def test_rules_do_not_run_on_construction():
    """Test that a request breaking its rules can still be built."""
    thing = Thing(kind="C")

    assert thing.zeta == ""
    assert thing.kind == "C"


def test_all_failing_fields_are_reported():
    """Test that validation collects every failing field, sorted by name."""
    with pytest.raises(ValidationErrors) as exc_info:
        validation.validate(Thing(kind="C"))

    assert exc_info.value.errors == {
        "alpha": "cannot be blank",
        "kind": "must be a valid value",
        "zeta": "cannot be blank",
    }
    assert str(exc_info.value) == "alpha: cannot be blank; kind: must be a valid value; zeta: cannot be blank."


def test_valid_model_passes():
    """Test that a model meeting its rules validates without error."""
    validation.validate(Thing(zeta="z", alpha="a", kind="B"))


def test_one_of_leaves_blank_to_required():
    """Test that one_of accepts blank values and supports a custom message."""
    rule = validation.one_of("A", "B")

    assert rule("A") is None
    assert rule("") is None
    assert rule("C") == "must be a valid value"
    assert validation.one_of("A", message="nope")("C") == "nope"


def test_require_reports_blank_arguments():
    """Test the check for scalar operation arguments."""
    validation.require(zone="example.com")

    with pytest.raises(ValidationErrors) as exc_info:
        validation.require(zone="", name="www", domain_name=None)

    assert exc_info.value.errors == {"domain_name": "cannot be blank", "zone": "cannot be blank"}


def test_decoding_a_payload_skips_rules():
    """Test that response payloads decode into models whose request rules they break."""
    record = RecordBody.model_validate({"name": "", "type": "BOGUS", "rdata": []})

    assert record.record_type == "BOGUS"


def test_nested_errors_use_dotted_keys():
    """Test that nested and list element errors are keyed by their path."""
    params = CreateEdgeHostnameRequest(
        contract_id="ctr_1",
        group_id="grp_2",
        edge_hostname=EdgeHostnameCreate(
            domain_prefix="www.example.com",
            domain_suffix="edgesuite.net",
            product_id="prd_Fresca",
            ip_version_behavior="IPV4",
            use_cases=[UseCase(option="BACKGROUND", type="LOCAL", use_case="Download_Mode")],
        ),
    )

    with pytest.raises(ValidationErrors) as exc_info:
        validation.validate(params)

    assert exc_info.value.errors == {"edge_hostname.use_cases.0.type": "must be a valid value"}


@pytest.mark.parametrize(
    "record, errors",
    [
        (RecordBody(name="www.example.com", record_type="A", ttl=300, target=["10.0.0.1"]), {}),
        (RecordBody(name="www.example.com", record_type="AKAMAICDN", target=["example.com"]), {}),
        (
            RecordBody(record_type="A", target=["10.0.0.1"]),
            {"name": "cannot be blank", "ttl": "cannot be blank"},
        ),
        (
            RecordBody(name="www.example.com", record_type="BOGUS", ttl=300, target=["x"]),
            {"record_type": "must be a valid value"},
        ),
        (
            RecordBody(name="www.example.com", record_type="TXT", ttl=300),
            {"target": "cannot be blank"},
        ),
    ],
)
def test_record_body(record, errors):
    """Test record set validation, including the AKAMAICDN TTL exemption."""
    if not errors:
        validation.validate(record)
        return
    with pytest.raises(ValidationErrors) as exc_info:
        validation.validate(record)
    assert exc_info.value.errors == errors


@pytest.mark.parametrize(
    "body, errors",
    [
        (
            EdgeHostnameCreate(
                domain_prefix="www.example.com",
                domain_suffix="edgesuite.net",
                product_id="prd_Fresca",
                secure_network="STANDARD_TLS",
                ip_version_behavior="IPV6_COMPLIANCE",
            ),
            {},
        ),
        (
            EdgeHostnameCreate(
                domain_prefix="www.example.com",
                domain_suffix="akamaized.net",
                product_id="prd_Fresca",
                secure_network="STANDARD_TLS",
                ip_version_behavior="IPV4",
            ),
            {"domain_suffix": "must be a valid value"},
        ),
        (
            EdgeHostnameCreate(
                domain_prefix="www.example.com",
                domain_suffix="edgekey.net",
                product_id="prd_Fresca",
                secure_network="ENHANCED_TLS",
                ip_version_behavior="IPV4",
            ),
            {"cert_enrollment_id": "cannot be blank"},
        ),
        (
            EdgeHostnameCreate(),
            {
                "domain_prefix": "cannot be blank",
                "domain_suffix": "cannot be blank",
                "ip_version_behavior": "cannot be blank",
                "product_id": "cannot be blank",
            },
        ),
    ],
)
def test_edge_hostname_create(body, errors):
    """Test the conditional rules tying domain suffix and certificate to the secure network."""
    if not errors:
        validation.validate(body)
        return
    with pytest.raises(ValidationErrors) as exc_info:
        validation.validate(body)
    assert exc_info.value.errors == errors


def test_base_model_validate_is_not_overridden():
    """Test that request and body models keep pydantic's own classmethods."""
    assert "validate" not in vars(RecordBody)
    assert "validate" not in vars(EdgeHostnameCreate)
    assert "validate" not in vars(CreateEdgeHostnameRequest)
