# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2024/10/23 20:44:02
# @Author : Kariko Lin

"""Poke the motion compensation INIs without the configurator window.

    python -m pyoxrmc list
    python -m pyoxrmc get <app> <section> <key>
    python -m pyoxrmc set <app> <section> <key> <value>
"""

import argparse

from .config import ConfigService
from .consts import CONFIG_DIR_ENV, DEFAULT_APP


def _cmd_list(service: ConfigService, args: argparse.Namespace) -> int:
    for i in service.list_application_items():
        print(f'{i.name}\t{i.display_name}')
    return 0


def _cmd_get(service: ConfigService, args: argparse.Namespace) -> int:
    entry = service.try_get_entry(args.application, args.section, args.key)
    if entry is None:
        print(f'{args.application}: [{args.section}] {args.key} not found')
        return 1
    print(entry.value + ('\t(default)' if entry.is_default else ''))
    return 0


def _cmd_set(service: ConfigService, args: argparse.Namespace) -> int:
    service.set_entry(args.application, args.section, args.key, args.value)
    return 0 if service.save_config_set(args.application) else 1


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog='pyoxrmc',
        description='Read and write OpenXR-MotionCompensation INIs.')
    ap.add_argument(
        '--root', default=None,
        help=f'config folder (default: ${CONFIG_DIR_ENV} or app data)')
    ap.add_argument(
        '--default-app', default=DEFAULT_APP,
        help='application supplying fallback values')
    sub = ap.add_subparsers(dest='command', required=True)

    p = sub.add_parser('list', help='list applications with a config file')
    p.set_defaults(func=_cmd_list)

    p = sub.add_parser('get', help='print a value, inherited or not')
    p.add_argument('application')
    p.add_argument('section')
    p.add_argument('key')
    p.set_defaults(func=_cmd_get)

    p = sub.add_parser('set', help='set a value and save that application')
    p.add_argument('application')
    p.add_argument('section')
    p.add_argument('key')
    p.add_argument('value')
    p.set_defaults(func=_cmd_set)

    args = ap.parse_args(argv)
    service = ConfigService(args.root, args.default_app)
    return args.func(service, args)


if __name__ == '__main__':
    raise SystemExit(main())
