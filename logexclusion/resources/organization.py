# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from logexclusion.exceptions import ParentResolutionError
from logexclusion.provider import resources
from logexclusion.resources.exclusion import (
    LoggingExclusionUpdater, parent_resource_id, resource_logging_exclusion)


ORGANIZATION_LOGGING_EXCLUSION_SCHEMA = {
    'org_id': {
        'type': 'string',
        'required': True,
        'force_new': True,
    },
}


class OrganizationLoggingExclusionUpdater(LoggingExclusionUpdater):

    resource_type = 'organizations'
    parent_field = 'org_id'

    @classmethod
    def resolve_resource_id(cls, d, config):
        org_id = parent_resource_id(d.get('org_id'), cls.resource_type)
        if not org_id:
            raise ParentResolutionError("org_id: required field is not set")
        return org_id


resources.register(
    'google_logging_organization_exclusion',
    resource_logging_exclusion(
        'google_logging_organization_exclusion',
        ORGANIZATION_LOGGING_EXCLUSION_SCHEMA,
        OrganizationLoggingExclusionUpdater))
