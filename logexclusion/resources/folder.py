# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from logexclusion.exceptions import ParentResolutionError
from logexclusion.provider import resources
from logexclusion.resources.exclusion import (
    LoggingExclusionUpdater, parent_resource_id, resource_logging_exclusion)


FOLDER_LOGGING_EXCLUSION_SCHEMA = {
    'folder': {
        'type': 'string',
        'required': True,
        'force_new': True,
    },
}


class FolderLoggingExclusionUpdater(LoggingExclusionUpdater):

    resource_type = 'folders'
    parent_field = 'folder'

    @classmethod
    def resolve_resource_id(cls, d, config):
        folder = parent_resource_id(d.get('folder'), cls.resource_type)
        if not folder:
            raise ParentResolutionError("folder: required field is not set")
        return folder


resources.register(
    'google_logging_folder_exclusion',
    resource_logging_exclusion(
        'google_logging_folder_exclusion',
        FOLDER_LOGGING_EXCLUSION_SCHEMA,
        FolderLoggingExclusionUpdater))
