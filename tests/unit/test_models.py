"""Unit tests for resource models, naming convention and report."""

from __future__ import annotations
import pytest

from aws_resource_reclaim.models import (
    DeletionOutcome,
    ReclaimConfig,
    ReclaimReport,
    ResourceIdentifier,
    ResourceType,
    RetryBudget,
)
from aws_resource_reclaim.models.config import DELETION_ORDER


@pytest.mark.unit
class TestResourceType:
    """Test type string mapping."""

    @pytest.mark.parametrize(
        "type_string,expected",
        [
            ("AWS::EC2::Instance", ResourceType.INSTANCE),
            ("AWS::EC2::NatGateway", ResourceType.NAT_GATEWAY),
            ("AWS::EC2::EIP", ResourceType.ELASTIC_IP),
            ("AWS::EC2::VPC", ResourceType.VPC),
        ],
    )
    def test_known_type_strings_map_to_members(self, type_string, expected):
        assert ResourceType.from_type_string(type_string) is expected

    def test_unknown_type_string_returns_none(self):
        """
        GIVEN a type string with a typo or an unsupported service
        WHEN it is mapped
        THEN None is returned instead of raising
        """
        assert ResourceType.from_type_string("AWS::EC2::Vpc") is None
        assert ResourceType.from_type_string("AWS::S3::Bucket") is None
        assert ResourceType.from_type_string("") is None


@pytest.mark.unit
class TestResourceIdentifier:
    """Test provider-native ID extraction."""

    def test_resource_id_is_last_arn_segment(self):
        identifier = ResourceIdentifier(
            ResourceType.SUBNET,
            "arn:aws:ec2:us-east-1:123456789012:subnet/subnet-0137cf1e7921c1551",
        )

        assert identifier.resource_id == "subnet-0137cf1e7921c1551"

    def test_resource_id_without_slash_is_whole_locator(self):
        identifier = ResourceIdentifier(ResourceType.VPC, "vpc-0baa2c4e9e48e608c")

        assert identifier.resource_id == "vpc-0baa2c4e9e48e608c"


@pytest.mark.unit
class TestDeletionOutcome:
    """Test outcome semantics."""

    def test_deleted_and_not_found_count_as_done(self):
        assert DeletionOutcome.DELETED.is_done
        assert DeletionOutcome.NOT_FOUND.is_done

    def test_other_outcomes_are_not_done(self):
        assert not DeletionOutcome.RETRYABLE.is_done
        assert not DeletionOutcome.FATAL.is_done
        assert not DeletionOutcome.GIVEN_UP.is_done


@pytest.mark.unit
class TestRetryBudget:
    """Test retry budget defaults and validation."""

    def test_defaults_are_thirty_attempts_five_seconds(self):
        budget = RetryBudget()

        assert budget.max_attempts == 30
        assert budget.delay_seconds == 5

    def test_rejects_zero_attempts(self):
        with pytest.raises(ValueError):
            RetryBudget(max_attempts=0)

    def test_rejects_negative_delay(self):
        with pytest.raises(ValueError):
            RetryBudget(delay_seconds=-1)


@pytest.mark.unit
class TestReclaimConfig:
    """Test configuration defaults and naming convention."""

    def test_default_deletion_order_is_dependency_order(self):
        """
        GIVEN default configuration
        WHEN deletion order is read
        THEN compute comes first and the VPC last
        """
        config = ReclaimConfig()

        assert config.deletion_order == DELETION_ORDER
        assert list(config.deletion_order) == [
            ResourceType.INSTANCE,
            ResourceType.SECURITY_GROUP,
            ResourceType.NAT_GATEWAY,
            ResourceType.ELASTIC_IP,
            ResourceType.INTERNET_GATEWAY,
            ResourceType.SUBNET,
            ResourceType.ROUTE_TABLE,
            ResourceType.VPC,
        ]

    def test_default_retry_budget(self):
        config = ReclaimConfig()

        assert config.retry_budget.max_attempts == 30
        assert config.retry_budget.delay_seconds == 5

    def test_names_follow_module_convention(self):
        """
        GIVEN a group key
        WHEN fixed-tail names are derived
        THEN every name follows the provisioning module's convention
        """
        names = ReclaimConfig().names_for("eks-module-tests-apply")

        assert names.resource_group == "eks-module-tests-apply-rg"
        assert names.key_pair == "eks-module-tests-apply-kp"
        assert names.log_group == "eks-module-tests-apply-log-group"
        assert names.node_group == "eks-module-tests-apply-node-group0"
        assert names.cluster == "eks-module-tests-apply"
        assert names.iam_roles == (
            "eks-module-tests-apply-eks-cluster-iam-role",
            "eks-module-tests-apply-eks-nodes-iam-role",
            "eks-module-tests-apply-cluster-autoscaler",
        )

    def test_custom_suffixes_are_applied(self):
        config = ReclaimConfig(key_pair_suffix="-keys", iam_role_suffixes=("-role",))

        names = config.names_for("run1")

        assert names.key_pair == "run1-keys"
        assert names.iam_roles == ("run1-role",)

    def test_empty_group_key_rejected(self):
        with pytest.raises(ValueError):
            ReclaimConfig().names_for("")


@pytest.mark.unit
class TestReclaimReport:
    """Test report aggregation and serialization."""

    def test_to_dict_counts_outcomes(self):
        report = ReclaimReport(group_key="run1", region="us-east-1")
        report.record("instance", "i-1", DeletionOutcome.DELETED)
        report.record("instance", "i-2", DeletionOutcome.NOT_FOUND)
        report.record("nat_gateway", "nat-1", DeletionOutcome.GIVEN_UP)

        data = report.to_dict()

        assert data["by_outcome"] == {"deleted": 1, "not_found": 1, "given_up": 1}
        assert data["records"][2] == {
            "component": "nat_gateway",
            "resource_id": "nat-1",
            "outcome": "given_up",
        }

    def test_given_up_lists_left_behind_resources(self):
        report = ReclaimReport(group_key="run1", region="us-east-1")
        report.record("vpc", "vpc-1", DeletionOutcome.DELETED)
        report.record("elastic_ip", "eipalloc-1", DeletionOutcome.GIVEN_UP)

        assert [r.resource_id for r in report.given_up] == ["eipalloc-1"]
