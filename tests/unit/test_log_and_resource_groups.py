"""Unit tests for log group and resource group record deletion."""

from __future__ import annotations
import pytest

from aws_resource_reclaim.errors import ReclaimError
from aws_resource_reclaim.logs.log_groups import delete_log_group
from aws_resource_reclaim.models import DeletionOutcome
from aws_resource_reclaim.resource_groups import delete_resource_group


@pytest.mark.unit
@pytest.mark.aws
class TestDeleteLogGroup:
    def test_deletes_log_group(self, mock_clients, config):
        outcome = delete_log_group(mock_clients, "run1-log-group", config)

        assert outcome is DeletionOutcome.DELETED
        mock_clients.logs.delete_log_group.assert_called_once_with(
            logGroupName="run1-log-group"
        )

    def test_not_found_is_absorbed(self, mock_clients, config, client_error):
        mock_clients.logs.delete_log_group.side_effect = client_error(
            "ResourceNotFoundException", "DeleteLogGroup"
        )

        assert (
            delete_log_group(mock_clients, "run1-log-group", config)
            is DeletionOutcome.NOT_FOUND
        )

    def test_service_unavailable_is_fatal(self, mock_clients, config, client_error):
        mock_clients.logs.delete_log_group.side_effect = client_error(
            "ServiceUnavailableException", "DeleteLogGroup"
        )

        with pytest.raises(ReclaimError):
            delete_log_group(mock_clients, "run1-log-group", config)


@pytest.mark.unit
@pytest.mark.aws
class TestDeleteResourceGroup:
    def test_deletes_group_record(self, mock_clients, config):
        outcome = delete_resource_group(mock_clients, "run1-rg", config)

        assert outcome is DeletionOutcome.DELETED
        mock_clients.resource_groups.delete_group.assert_called_once_with(
            Group="run1-rg"
        )

    def test_not_found_is_absorbed(self, mock_clients, config, client_error):
        mock_clients.resource_groups.delete_group.side_effect = client_error(
            "NotFoundException", "DeleteGroup"
        )

        assert (
            delete_resource_group(mock_clients, "run1-rg", config)
            is DeletionOutcome.NOT_FOUND
        )

    def test_dry_run_does_not_delete(self, mock_clients, dry_run_config):
        delete_resource_group(mock_clients, "run1-rg", dry_run_config)

        mock_clients.resource_groups.delete_group.assert_not_called()
