# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from logexclusion.exceptions import ParentResolutionError
from logexclusion.provider import resources
from logexclusion.resources.exclusion import (
    LoggingExclusionUpdater, parent_resource_id, resource_logging_exclusion)


BILLING_ACCOUNT_LOGGING_EXCLUSION_SCHEMA = {
    'billing_account': {
        'type': 'string',
        'required': True,
        'force_new': True,
    },
}


class BillingAccountLoggingExclusionUpdater(LoggingExclusionUpdater):

    resource_type = 'billingAccounts'
    parent_field = 'billing_account'
    # ids persisted before the api collection name was used
    resource_type_aliases = ('billingAccount',)

    @classmethod
    def resolve_resource_id(cls, d, config):
        account = parent_resource_id(d.get('billing_account'), cls.resource_type)
        if not account:
            raise ParentResolutionError(
                "billing_account: required field is not set")
        return account


resources.register(
    'google_logging_billing_account_exclusion',
    resource_logging_exclusion(
        'google_logging_billing_account_exclusion',
        BILLING_ACCOUNT_LOGGING_EXCLUSION_SCHEMA,
        BillingAccountLoggingExclusionUpdater))
