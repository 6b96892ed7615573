# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from jsonschema import Draft7Validator

from logexclusion.client import Session
from logexclusion.exceptions import ParentResolutionError, ProviderError


class Bag(dict):

    def __getattr__(self, k):
        try:
            return self[k]
        except KeyError:
            raise AttributeError(k)

    def __setattr__(self, k, v):
        self[k] = v


class Config(Bag):
    """Provider configuration.

    Handed explicitly to every resource operation, holds the default
    project and the api session used for remote calls.
    """

    schema = {
        'type': 'object',
        'additionalProperties': False,
        'properties': {
            'project': {'type': ['string', 'null']},
            'credentials_file': {'type': ['string', 'null']},
            'session_factory': {},
            'session': {},
            'verbose': {'type': 'boolean'},
            'debug': {'type': 'boolean'},
        }
    }

    @classmethod
    def empty(cls, **kw):
        d = {
            'project': None,
            'credentials_file': None,
            'session_factory': None,
            'session': None,
            'verbose': False,
            'debug': False,
        }
        d.update(kw)
        return cls(d)

    def from_cli(self, options):
        self.update(dict(
            project=getattr(options, 'project', None),
            credentials_file=getattr(options, 'credentials', None),
            verbose=getattr(options, 'verbose', False),
            debug=getattr(options, 'debug', False)))
        return self

    def validate(self):
        errors = sorted(
            Draft7Validator(self.schema).iter_errors(dict(self)),
            key=lambda e: list(e.path))
        if errors:
            raise ProviderError(
                "Invalid provider config: %s" % (
                    "; ".join(e.message for e in errors)))
        return self

    def get_session(self):
        if self.get('session') is None:
            if self.get('session_factory') is not None:
                self['session'] = self.session_factory()
            else:
                self['session'] = Session(
                    project_id=self.get('project'),
                    credentials_file=self.get('credentials_file'))
        return self['session']

    def logging_client(self, component):
        return self.get_session().client('logging', 'v2', component)


def get_project(d, config):
    """Resolve the project for a resource.

    Uses the resource's own `project` attribute, then the provider default,
    then whatever the api session can infer from the environment.
    """
    project = d.get('project') if 'project' in d.schema else None
    if not project:
        project = config.get('project')
    if not project:
        project = config.get_session().get_default_project()
    if not project:
        raise ParentResolutionError(
            "project: required field is not set")
    return project
