# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
# PYTHON_ARGCOMPLETE_OK
import argparse
import logging
import pdb
import sys
import traceback

import argcomplete

from logexclusion import commands


def _default_options(p):
    """Add basic options to the subparser."""
    p.add_argument(
        "--project", default=None,
        help="Default project for project scoped resources")
    p.add_argument(
        "--credentials", default=None,
        help="Service account key file (Default: application default credentials)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Verbose Logging")
    p.add_argument("--debug", action="store_true",
                   help="Dev Debug")


def setup_parser():
    parser = argparse.ArgumentParser(prog='logexclusion')

    # Setting `dest` means we capture which subparser was used.
    subs = parser.add_subparsers(dest='subparser')

    schema = subs.add_parser(
        'schema', description="Browse the available resources and their attributes")
    schema.set_defaults(command=commands.schema_cmd)
    schema.add_argument('resource', nargs='?', default=None)
    schema.add_argument("-v", "--verbose", action="store_true",
                        help="Verbose Logging")
    schema.add_argument("--debug", default=False, help=argparse.SUPPRESS)

    imp = subs.add_parser(
        'import', description="Read an existing exclusion given its canonical id")
    imp.set_defaults(command=commands.import_cmd)
    imp.add_argument('resource', help="Resource type")
    imp.add_argument('id', help="Canonical id, ie. projects/p/exclusions/name")
    _default_options(imp)

    create = subs.add_parser('create')
    create.set_defaults(command=commands.create_cmd)
    create.add_argument('resource', help="Resource type")
    create.add_argument("-f", "--file", required=True,
                        help="Resource attributes file (yaml or json)")
    _default_options(create)

    update = subs.add_parser('update')
    update.set_defaults(command=commands.update_cmd)
    update.add_argument('resource', help="Resource type")
    update.add_argument('id', help="Canonical id")
    update.add_argument("-f", "--file", required=True,
                        help="Resource attributes file (yaml or json)")
    _default_options(update)

    delete = subs.add_parser('delete')
    delete.set_defaults(command=commands.delete_cmd)
    delete.add_argument('resource', help="Resource type")
    delete.add_argument('id', help="Canonical id")
    _default_options(delete)

    return parser


def main():
    parser = setup_parser()
    argcomplete.autocomplete(parser)
    options = parser.parse_args()
    if getattr(options, 'command', None) is None:
        parser.print_help()
        sys.exit(2)

    level = options.verbose and logging.DEBUG or logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s: %(name)s:%(levelname)s %(message)s")
    logging.getLogger('googleapiclient.discovery').setLevel(logging.WARNING)
    logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.ERROR)

    try:
        options.command(options)
    except Exception:
        if not options.debug:
            raise
        traceback.print_exc()
        pdb.post_mortem(sys.exc_info()[-1])


if __name__ == '__main__':
    main()
