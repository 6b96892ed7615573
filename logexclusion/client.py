# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""Google Cloud api session and service clients.

Clients are built from the discovery documents bundled with the api
client library, so constructing one does not touch the network.
"""
import logging
import os

import google.auth
from google.oauth2 import service_account
from googleapiclient import discovery, errors  # noqa: F401

log = logging.getLogger('logexclusion.client')

CLOUD_SCOPES = frozenset(['https://www.googleapis.com/auth/cloud-platform'])

PROJECT_ENV_VARS = ('GOOGLE_CLOUD_PROJECT', 'CLOUDSDK_CORE_PROJECT')


class Session(object):
    """Base class for api sessions."""

    def __init__(self, credentials=None, project_id=None, http=None,
                 credentials_file=None):
        self._credentials = credentials
        self._credentials_file = credentials_file
        self._credentials_project = None
        self._default_project = project_id
        self._http = http
        self._services = {}

    def get_credentials(self):
        if self._credentials is not None:
            return self._credentials
        if self._credentials_file:
            self._credentials = service_account.Credentials.from_service_account_file(
                self._credentials_file, scopes=list(CLOUD_SCOPES))
            self._credentials_project = self._credentials.project_id
        else:
            self._credentials, self._credentials_project = google.auth.default(
                scopes=list(CLOUD_SCOPES))
        return self._credentials

    def get_default_project(self):
        if self._default_project:
            return self._default_project
        for k in PROJECT_ENV_VARS:
            if os.environ.get(k):
                return os.environ[k]
        if self._http is None:
            self.get_credentials()
        return self._credentials_project

    def _build(self, service_name, version):
        key = (service_name, version)
        if key in self._services:
            return self._services[key]
        log.debug("building api client %s %s", service_name, version)
        if self._http is not None:
            # http and credentials are mutually exclusive for build
            service = discovery.build(
                service_name, version, http=self._http,
                cache_discovery=False, static_discovery=True)
        else:
            service = discovery.build(
                service_name, version, credentials=self.get_credentials(),
                cache_discovery=False, static_discovery=True)
        self._services[key] = service
        return service

    def client(self, service_name, version, component):
        """Return a ServiceClient for the given api component.

        :param service_name: api service, ie. 'logging'
        :param version: api version, ie. 'v2'
        :param component: dotted resource path, ie. 'projects.exclusions'
        """
        return ServiceClient(
            self._build(service_name, version), component)


class ServiceClient(object):
    """Execute verbs against a single api resource component."""

    def __init__(self, service, component):
        self._service = service
        self._component = component

    @property
    def component(self):
        return self._component

    def _build_resource(self):
        resource = self._service
        for part in self._component.split('.'):
            resource = getattr(resource, part)()
        return resource

    def execute_command(self, verb, verb_arguments):
        """Execute an api method, returning the decoded response body.

        Raises googleapiclient.errors.HttpError on api failures.
        """
        log.debug(
            "executing %s.%s %s", self._component, verb, verb_arguments)
        request = getattr(self._build_resource(), verb)(**verb_arguments)
        return request.execute()
