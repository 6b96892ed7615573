# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import json
import os

import yaml


def load_file(path, format=None):
    if format is None:
        format = 'yaml'
        _, ext = os.path.splitext(path)
        if ext[1:] == 'json':
            format = 'json'

    with open(path) as fh:
        contents = fh.read()

    if format == 'json':
        return json.loads(contents)
    return yaml.safe_load(contents)


def yaml_dump(value):
    return yaml.safe_dump(value, default_flow_style=False)
