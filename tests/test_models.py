"""
Unit tests for enclave SDK wire models.
"""

import pytest
from pydantic import ValidationError

from enclave_sdk.modules.api.models import (
    ExecCommandRequest,
    ExecCommandResponse,
    PortSpec,
    ServiceInfo,
    TransportProtocol,
)


class TestPortSpec:
    """Test port specification model."""

    def test_defaults_to_tcp(self):
        port = PortSpec(number=80)
        assert port.transport_protocol == TransportProtocol.TCP
        assert port.maybe_application_protocol is None

    def test_protocol_from_string(self):
        port = PortSpec(number=53, transport_protocol="UDP", maybe_application_protocol="dns")
        assert port.transport_protocol == TransportProtocol.UDP
        assert port.maybe_application_protocol == "dns"

    @pytest.mark.parametrize("number", [0, 65536, -1])
    def test_out_of_range_port_rejected(self, number):
        with pytest.raises(ValidationError):
            PortSpec(number=number)

    def test_unknown_protocol_rejected(self):
        with pytest.raises(ValidationError):
            PortSpec(number=80, transport_protocol="QUIC")

    def test_frozen(self):
        port = PortSpec(number=80)
        with pytest.raises(ValidationError):
            port.number = 81


class TestServiceInfo:
    """Test service description model."""

    def test_parses_api_payload(self):
        info = ServiceInfo.model_validate(
            {
                "service_id": "web",
                "service_guid": "web-1667834821",
                "private_ip_address": "172.16.0.4",
                "private_ports": {"http": {"number": 80, "maybe_application_protocol": "http"}},
                "maybe_public_ip_address": "127.0.0.1",
                "maybe_public_ports": {"http": {"number": 49153}},
            }
        )

        assert info.private_ports["http"].number == 80
        assert info.maybe_public_ports["http"].number == 49153

    def test_public_fields_optional(self):
        info = ServiceInfo(service_id="db", service_guid="db-1", private_ip_address="172.16.0.5")
        assert info.maybe_public_ip_address is None
        assert info.private_ports == {}
        assert info.maybe_public_ports == {}

    def test_empty_service_id_rejected(self):
        with pytest.raises(ValidationError):
            ServiceInfo(service_id="", service_guid="x", private_ip_address="172.16.0.5")


class TestExecModels:
    """Test exec request and response models."""

    def test_request_accepts_any_args(self):
        request = ExecCommandRequest(service_id="web", command_args=["sh", "-c", "rm -rf / ; echo $?"])
        assert request.command_args[2] == "rm -rf / ; echo $?"

    def test_request_allows_empty_args(self):
        assert ExecCommandRequest(service_id="web").command_args == []

    def test_response_requires_exit_code(self):
        with pytest.raises(ValidationError):
            ExecCommandResponse(log_output="hi\n")

    def test_response_output_defaults_empty(self):
        assert ExecCommandResponse(exit_code=0).log_output == ""
