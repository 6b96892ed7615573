# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from logexclusion.config import get_project
from logexclusion.provider import resources
from logexclusion.resources.exclusion import (
    LoggingExclusionUpdater, resource_logging_exclusion)


PROJECT_LOGGING_EXCLUSION_SCHEMA = {
    'project': {
        'type': 'string',
        'optional': True,
        'computed': True,
        'force_new': True,
    },
}


class ProjectLoggingExclusionUpdater(LoggingExclusionUpdater):

    resource_type = 'projects'
    parent_field = 'project'

    @classmethod
    def resolve_resource_id(cls, d, config):
        return get_project(d, config)


resources.register(
    'google_logging_project_exclusion',
    resource_logging_exclusion(
        'google_logging_project_exclusion',
        PROJECT_LOGGING_EXCLUSION_SCHEMA,
        ProjectLoggingExclusionUpdater))
