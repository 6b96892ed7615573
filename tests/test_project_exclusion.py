# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from common import BaseTest, PROJECT_ID

from logexclusion.exceptions import (
    InvalidIdError, ParentResolutionError, RemoteError, RemoteNotFoundError,
    ReplacementRequiredError, ResourceValidationError)
from logexclusion.resources.exclusion import (
    expand_resource_logging_exclusion_for_update,
    resource_logging_exclusion_read)
from logexclusion.resources.project import ProjectLoggingExclusionUpdater

EXCLUSION_ID = 'projects/my-proj/exclusions/tf-test-excl-1'

BASIC = {
    'name': 'tf-test-excl-1',
    'filter': 'severity>=ERROR',
    'description': '',
    'disabled': False,
}


class ProjectExclusionTest(BaseTest):

    resource_type = 'google_logging_project_exclusion'

    def setUp(self):
        self.api = self.get_api()
        self.config = self.get_config(self.api)
        self.resource = self.load_resource(self.resource_type)

    def create(self, attrs=BASIC):
        return self.resource.create(self.resource.data(config=dict(attrs)), self.config)

    def prior(self, d, **changes):
        """Resource data for an update from the persisted state of d."""
        state = d.state()
        id = state.pop('id')
        desired = {k: v for k, v in state.items() if k != 'project'}
        desired.update(changes)
        return self.resource.data(state=state, config=desired, id=id)

    def test_create_read(self):
        d = self.create()
        self.assertEqual(d.id, EXCLUSION_ID)
        self.assertEqual(self.api.verbs(), ['create', 'get'])
        component, _, params = self.api.calls[0]
        self.assertEqual(component, 'projects.exclusions')
        self.assertEqual(params['parent'], 'projects/my-proj')
        self.assertEqual(params['body'], BASIC)

        d = self.resource.read(self.resource.data(id=d.id), self.config)
        self.assertEqual(d.get('filter'), 'severity>=ERROR')
        self.assertIs(d.get('disabled'), False)
        self.assertEqual(d.get('project'), PROJECT_ID)

    def test_create_explicit_project(self):
        d = self.create(dict(BASIC, project='other-proj'))
        self.assertEqual(d.id, 'projects/other-proj/exclusions/tf-test-excl-1')
        self.assertEqual(d.get('project'), 'other-proj')
        self.assertIn(d.id, self.api.exclusions)

    def test_create_failure_sets_no_id(self):
        self.api.fail_next(400, "Invalid filter")
        d = self.resource.data(config=dict(BASIC))
        with self.assertRaises(RemoteError) as cm:
            self.resource.create(d, self.config)
        self.assertEqual(cm.exception.status, 400)
        self.assertEqual(d.id, '')
        self.assertIsNone(d.state())

    def test_create_invalid(self):
        d = self.resource.data(config={'name': 'tf-test-excl-1'})
        self.assertRaises(
            ResourceValidationError, self.resource.create, d, self.config)
        self.assertEqual(self.api.calls, [])

    def test_parent_resolution_failure(self):
        config = self.get_config(self.api, project=None)
        d = self.resource.data(config=dict(BASIC))
        self.assertRaises(
            ParentResolutionError, self.resource.create, d, config)
        self.assertEqual(self.api.calls, [])

    def test_read_not_found_removes(self):
        d = self.resource.data(
            state=dict(BASIC, project=PROJECT_ID), id=EXCLUSION_ID)
        with self.assertLogs('logexclusion.resources.exclusion', 'WARNING'):
            self.resource.read(d, self.config)
        self.assertEqual(d.id, '')
        self.assertIsNone(d.state())

    def test_read_other_error(self):
        self.create()
        self.api.fail_next(403, "Permission denied")
        d = self.resource.data(id=EXCLUSION_ID)
        self.assertRaises(RemoteError, self.resource.read, d, self.config)
        self.assertEqual(d.id, EXCLUSION_ID)

    def test_update_disabled_only(self):
        d = self.prior(self.create(), disabled=True)
        self.assertEqual(
            expand_resource_logging_exclusion_for_update(d),
            ({'disabled': True}, 'disabled'))
        self.resource.update(d, self.config)

        _, verb, params = self.api.calls[-2]
        self.assertEqual(verb, 'patch')
        self.assertEqual(params['updateMask'], 'disabled')
        self.assertEqual(params['body'], {'disabled': True})
        self.assertEqual(params['name'], EXCLUSION_ID)
        self.assertIs(d.get('disabled'), True)
        self.assertIs(self.api.exclusions[EXCLUSION_ID]['disabled'], True)

    def test_update_mask_order(self):
        d = self.prior(
            self.create(), disabled=True, filter='severity>=WARNING',
            description='drop warnings')
        exclusion, update_mask = expand_resource_logging_exclusion_for_update(d)
        self.assertEqual(update_mask, 'description,filter,disabled')
        self.assertEqual(exclusion, {
            'description': 'drop warnings',
            'filter': 'severity>=WARNING',
            'disabled': True})

    def test_update_clear_description(self):
        d = self.prior(self.create(dict(BASIC, description='noisy')), description='')
        self.assertEqual(
            expand_resource_logging_exclusion_for_update(d),
            ({'description': ''}, 'description'))
        self.resource.update(d, self.config)
        self.assertEqual(d.get('description'), '')

    def test_update_omitted_optional_attributes(self):
        created = self.create(dict(BASIC, description='noisy', disabled=True))
        state = created.state()
        id = state.pop('id')
        d = self.resource.data(
            state=state,
            config={'name': 'tf-test-excl-1', 'filter': 'severity>=ERROR'},
            id=id)
        self.assertEqual(
            expand_resource_logging_exclusion_for_update(d),
            ({'description': '', 'disabled': False}, 'description,disabled'))
        self.assertEqual(d.requires_new(), [])
        self.resource.update(d, self.config)

        _, verb, params = self.api.calls[-2]
        self.assertEqual(verb, 'patch')
        self.assertEqual(params['updateMask'], 'description,disabled')
        self.assertEqual(params['body'], {'description': '', 'disabled': False})
        self.assertEqual(d.get('description'), '')
        self.assertIs(d.get('disabled'), False)
        self.assertEqual(d.get('project'), PROJECT_ID)
        self.assertEqual(d.state()['disabled'], False)

    def test_update_no_changes(self):
        d = self.prior(self.create())
        self.assertEqual(
            expand_resource_logging_exclusion_for_update(d), ({}, ''))
        self.resource.update(d, self.config)
        self.assertNotIn('patch', self.api.verbs())
        self.assertEqual(d.id, EXCLUSION_ID)

    def test_update_name_requires_replacement(self):
        d = self.prior(self.create(), name='tf-test-excl-2')
        self.assertRaises(
            ReplacementRequiredError, self.resource.update, d, self.config)
        self.assertNotIn('patch', self.api.verbs())

    def test_update_missing_surfaces(self):
        d = self.prior(self.create(), disabled=True)
        del self.api.exclusions[EXCLUSION_ID]
        self.assertRaises(
            RemoteNotFoundError, self.resource.update, d, self.config)

    def test_delete(self):
        d = self.create()
        self.resource.delete(d, self.config)
        self.assertEqual(d.id, '')
        self.assertEqual(self.api.exclusions, {})

        # a later read treats the exclusion as gone rather than failing
        d = self.resource.data(state=dict(BASIC), id=EXCLUSION_ID)
        self.resource.read(d, self.config)
        self.assertEqual(d.id, '')

    def test_delete_missing_surfaces(self):
        d = self.resource.data(state=dict(BASIC), id=EXCLUSION_ID)
        self.assertRaises(
            RemoteNotFoundError, self.resource.delete, d, self.config)
        self.assertEqual(d.id, EXCLUSION_ID)

    def test_import(self):
        self.create(dict(BASIC, description='drop errors', disabled=True))
        self.api.calls[:] = []

        # provider default project differs from the imported id's
        config = self.get_config(self.api, project='default-proj')
        d = self.resource.import_state(EXCLUSION_ID, config)
        self.assertEqual(d.state(), {
            'id': EXCLUSION_ID,
            'name': 'tf-test-excl-1',
            'filter': 'severity>=ERROR',
            'description': 'drop errors',
            'disabled': True,
            'project': 'my-proj'})
        self.assertEqual(self.api.calls, [
            ('projects.exclusions', 'get', {'name': EXCLUSION_ID})])

    def test_import_wrong_parent(self):
        self.assertRaises(
            InvalidIdError, self.resource.import_state,
            'folders/1234/exclusions/tf-test-excl-1', self.config)

    def test_import_not_found(self):
        d = self.resource.import_state(EXCLUSION_ID, self.config)
        self.assertEqual(d.id, '')

    def test_generic_read_with_custom_factory(self):
        self.create()
        seen = []

        def new_updater(d, config):
            seen.append(d.id)
            return ProjectLoggingExclusionUpdater('my-proj', config)

        d = self.resource.data(id=EXCLUSION_ID)
        resource_logging_exclusion_read(new_updater)(d, self.config)
        self.assertEqual(seen, [EXCLUSION_ID])
        self.assertEqual(d.get('name'), 'tf-test-excl-1')


class ProjectUpdaterTest(BaseTest):

    def test_describe(self):
        config = self.get_config(self.get_api())
        d = self.load_resource('google_logging_project_exclusion').data()
        updater = ProjectLoggingExclusionUpdater.new(d, config)
        self.assertEqual(updater.resource_type, 'projects')
        self.assertEqual(updater.resource_id, PROJECT_ID)
        self.assertEqual(updater.describe_resource(), 'projects "my-proj"')
