# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import json
import unittest

import httplib2
from googleapiclient.errors import HttpError

from logexclusion.config import Config
from logexclusion.provider import load_resources

PROJECT_ID = 'my-proj'

STATUS_NAMES = {
    400: 'INVALID_ARGUMENT',
    403: 'PERMISSION_DENIED',
    404: 'NOT_FOUND',
    409: 'ALREADY_EXISTS',
}


def http_error(status, message, uri=None):
    resp = httplib2.Response({'status': status})
    content = json.dumps({'error': {
        'code': status,
        'message': message,
        'status': STATUS_NAMES.get(status, 'UNKNOWN')}}).encode('utf8')
    return HttpError(resp, content, uri=uri)


class FakeLogging(object):
    """In memory stand-in for the logging api exclusion collections.

    Records every call as (component, verb, params).
    """

    def __init__(self, default_project=None):
        self.default_project = default_project
        self.exclusions = {}
        self.calls = []
        self.failures = []

    def get_default_project(self):
        return self.default_project

    def client(self, service_name, version, component):
        assert (service_name, version) == ('logging', 'v2')
        return FakeExclusionClient(self, component)

    def fail_next(self, status, message="injected failure"):
        self.failures.append((status, message))

    def verbs(self):
        return [verb for _, verb, _ in self.calls]


class FakeExclusionClient(object):

    def __init__(self, api, component):
        self.api = api
        self.component = component

    def execute_command(self, verb, params):
        self.api.calls.append((self.component, verb, params))
        if self.api.failures:
            status, message = self.api.failures.pop(0)
            raise http_error(status, message)
        return getattr(self, '_%s' % verb)(params)

    def _check_collection(self, name):
        collection = self.component.split('.')[0]
        assert name.startswith(collection + '/'), (name, self.component)

    def _lookup(self, name):
        self._check_collection(name)
        if name not in self.api.exclusions:
            raise http_error(404, "Exclusion %s does not exist" % name)
        return self.api.exclusions[name]

    def _create(self, params):
        self._check_collection(params['parent'])
        body = params['body']
        name = '%s/exclusions/%s' % (params['parent'], body['name'])
        if name in self.api.exclusions:
            raise http_error(409, "Exclusion %s already exists" % name)
        exclusion = dict(body)
        exclusion['createTime'] = '2019-01-01T00:00:00Z'
        # the api omits default values
        if not exclusion.get('description'):
            exclusion.pop('description', None)
        if not exclusion.get('disabled'):
            exclusion.pop('disabled', None)
        self.api.exclusions[name] = exclusion
        return dict(exclusion)

    def _get(self, params):
        return dict(self._lookup(params['name']))

    def _patch(self, params):
        exclusion = self._lookup(params['name'])
        for k in params['updateMask'].split(','):
            exclusion[k] = params['body'][k]
        return dict(exclusion)

    def _delete(self, params):
        self._lookup(params['name'])
        del self.api.exclusions[params['name']]
        return {}


class BaseTest(unittest.TestCase):

    def get_api(self, default_project=None):
        return FakeLogging(default_project)

    def get_config(self, api, project=PROJECT_ID, **kw):
        return Config.empty(
            project=project, session_factory=lambda: api, **kw)

    def load_resource(self, type_name):
        resource = load_resources().get(type_name)
        self.assertIsNotNone(resource, type_name)
        return resource
