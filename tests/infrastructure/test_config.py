"""
Tests for network configuration validation and stack config loading.
"""

import pulumi
import pytest

from vpc_iac.configs.base import NetworkConfig, NetworkConfigError
from vpc_iac.configs.constants import DEFAULT_INTERFACE_ENDPOINTS
from vpc_iac.configs.environment import get_config


class TestNetworkConfigValidation:
    """NetworkConfig rejects topologies that cannot be declared."""

    def test_defaults(self):
        config = NetworkConfig(environment="dev")

        assert config.vpc_cidr == "10.0.0.0/16"
        assert config.az_count == 2
        assert config.enable_nat_gateway is True
        assert config.enable_vpc_endpoints is False
        assert config.gateway_endpoint_services == ("s3",)
        assert config.get_tags() == {"Environment": "dev", "Project": "vpc"}

    @pytest.mark.parametrize(
        "enable_nat, single_nat, az_count, expected",
        [
            (True, False, 3, 3),
            (True, True, 3, 1),
            (False, False, 3, 0),
        ],
    )
    def test_nat_gateway_count(self, enable_nat, single_nat, az_count, expected):
        config = NetworkConfig(
            environment="dev",
            az_count=az_count,
            enable_nat_gateway=enable_nat,
            single_nat_gateway=single_nat,
        )

        assert config.nat_gateway_count == expected

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"environment": ""}, "environment"),
            ({"az_count": 0}, "az_count"),
            ({"vpc_cidr": "10.0.0.0/33"}, "invalid vpc_cidr"),
            ({"vpc_cidr": "10.0.0.0/8"}, "between /16 and /28"),
            ({"subnet_newbits": 0}, "subnet_newbits"),
            ({"vpc_cidr": "10.0.0.0/24", "subnet_newbits": 8}, "subnet_newbits"),
            ({"availability_zones": ("us-east-1a",)}, "availability_zones"),
            ({"availability_zones": ("us-east-1a", "us-east-1a")}, "repeat"),
            ({"private_subnet_cidrs": ("10.0.9.0/24",)}, "private_subnet_cidrs"),
            ({"gateway_endpoint_services": ("s3", "sqs")}, "gateway endpoints"),
            ({"gateway_endpoint_services": ("s3", "s3")}, "repeats service 's3'"),
            ({"interface_endpoint_services": ("ssm", "ssm")}, "repeats service 'ssm'"),
            ({"interface_endpoint_services": ("ecr.api", "ecr-api")}, "same endpoint name 'ecr-api'"),
            ({"interface_endpoint_services": ("logs", "")}, "empty service name"),
            ({"enable_nat_gateway": False, "single_nat_gateway": True}, "single_nat_gateway"),
        ],
    )
    def test_invalid_configuration(self, overrides, message):
        params = {"environment": "dev", **overrides}

        with pytest.raises(NetworkConfigError, match=message):
            NetworkConfig(**params)

    def test_same_service_allowed_as_gateway_and_interface(self):
        config = NetworkConfig(
            environment="dev",
            gateway_endpoint_services=("s3",),
            interface_endpoint_services=("s3", "ecr.api", "ecr.dkr"),
        )

        assert config.interface_endpoint_services == ("s3", "ecr.api", "ecr.dkr")


class TestGetConfig:
    """get_config builds NetworkConfig from Pulumi stack config values."""

    def test_minimal_stack_config(self, stack_config):
        stack_config["environment"] = "staging"

        config = get_config()

        assert config.environment == "staging"
        assert config.project == "vpc-network"
        assert config.vpc_cidr == "10.0.0.0/16"
        assert config.interface_endpoint_services == DEFAULT_INTERFACE_ENDPOINTS
        assert config.tags == {}
        assert config.outputs_env_file is None

    def test_full_stack_config(self, stack_config):
        stack_config.update({
            "environment": "prod",
            "project": "edge",
            "vpc_cidr": "10.50.0.0/16",
            "az_count": "3",
            "availability_zones": '["eu-west-1a", "eu-west-1b", "eu-west-1c"]',
            "subnet_newbits": "4",
            "single_nat_gateway": "true",
            "enable_vpc_endpoints": "true",
            "gateway_endpoint_services": '["s3", "dynamodb"]',
            "interface_endpoint_services": '["sts"]',
            "tags": '{"CostCenter": "platform", "Owner": 7}',
            "outputs_env_file": "out/network.env",
        })

        config = get_config()

        assert config.is_production
        assert config.project == "edge"
        assert config.az_count == 3
        assert config.availability_zones == ("eu-west-1a", "eu-west-1b", "eu-west-1c")
        assert config.subnet_newbits == 4
        assert config.nat_gateway_count == 1
        assert config.gateway_endpoint_services == ("s3", "dynamodb")
        assert config.interface_endpoint_services == ("sts",)
        assert config.tags == {"CostCenter": "platform", "Owner": "7"}
        assert config.outputs_env_file == "out/network.env"

    def test_explicit_zero_is_not_replaced_by_default(self, stack_config):
        stack_config.update({"environment": "dev", "az_count": "0"})

        with pytest.raises(NetworkConfigError, match="az_count"):
            get_config()

    def test_missing_environment(self, stack_config):
        with pytest.raises(pulumi.ConfigMissingError):
            get_config()

    def test_list_values_must_be_strings(self, stack_config):
        stack_config.update({"environment": "dev", "availability_zones": "[1, 2]"})

        with pytest.raises(NetworkConfigError, match="list of strings"):
            get_config()

    def test_tags_must_be_mapping(self, stack_config):
        stack_config.update({"environment": "dev", "tags": '["a"]'})

        with pytest.raises(NetworkConfigError, match="mapping"):
            get_config()
