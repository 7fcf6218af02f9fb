# Command-line argument parsing
#
# Main features:
#   - build_parser(): argparse tree with one subcommand per workflow
#   - parse_args(): parse argv into a Namespace
#
# Required positionals are declared optional (nargs='?') and validated by the
# handlers, so a missing value is reported as a usage error with exit code 1.

import argparse
from typing import List, Optional

from ..core.terraform import OPERATIONS
from ..domain.text_case import TRANSFORMS


def validate_positive_int(value: str) -> int:
    """Argument must be an integer >= 1"""
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be an integer: {value}")
    if num < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer >= 1: {value}")
    return num


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dev-utils",
        description="Git, GitHub and Terraform workflow shortcuts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s clone-org my-github-org               # clone/update into ./my-github-org_repos
  %(prog)s clone-org my-github-org ~/dev/org     # custom target directory
  %(prog)s rebase                                # rebase current branch onto main
  %(prog)s commit "Fix typo"                     # terraform fmt (if needed) + git commit -am
  %(prog)s tf plan --env dev                     # terraform plan -var-file=environments/dev.tfvars
  echo "hello WORLD" | %(prog)s case sentence    # -> Hello world
        """
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')

    # clone-org
    clone_parser = subparsers.add_parser(
        'clone-org',
        aliases=['clone_org'],
        help='clone or update all non-archived repositories of a GitHub organization',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Existing git checkouts are updated with `git pull --rebase`; missing ones are
cloned with `gh repo clone`; paths occupied by anything else are skipped.
Exit code is 1 when any clone or update failed.
        """
    )
    clone_parser.add_argument('org', nargs='?', help='organization (or user) name')
    clone_parser.add_argument('target_dir', nargs='?', help='clone root (default: ./<org>_repos)')
    clone_parser.add_argument(
        '-l', '--limit',
        type=validate_positive_int,
        default=None,
        metavar='NUM',
        help='maximum number of repositories to fetch (default: config repo_limit, 5000)'
    )
    clone_parser.add_argument(
        '--json',
        action='store_true',
        help='print one JSON record per repository and a summary record on stdout'
    )
    clone_parser.add_argument(
        '-f', '--failed-file',
        default=None,
        metavar='FILE',
        help='write the names of repositories that failed to FILE'
    )

    # branch helpers
    subparsers.add_parser('branch', help='print the current branch and copy it to the clipboard')

    rebase_parser = subparsers.add_parser('rebase', help='rebase the current branch onto TARGET')
    rebase_parser.add_argument('target', nargs='?', default=None, help='target branch (default: main)')
    subparsers.add_parser('rebase-main', help='rebase the current branch onto main')
    subparsers.add_parser('rebase-master', help='rebase the current branch onto master')

    subparsers.add_parser('main', help='checkout main and pull')
    subparsers.add_parser('status', help='git status')

    commit_parser = subparsers.add_parser('commit', help='terraform fmt (when needed) and git commit -am')
    commit_parser.add_argument('message', nargs='?', help='commit message')
    commit_parser.add_argument('--no-verify', action='store_true', help='bypass pre-commit hooks')

    force_parser = subparsers.add_parser('force-commit', help='commit with --no-verify')
    force_parser.add_argument('message', nargs='?', help='commit message')

    new_parser = subparsers.add_parser('new', help='create a branch and check it out')
    new_parser.add_argument('name', nargs='?', help='new branch name')

    # terraform
    tf_parser = subparsers.add_parser('tf', help='terraform shortcuts')
    tf_sub = tf_parser.add_subparsers(dest='tf_command', metavar='TF_COMMAND')
    for operation in OPERATIONS:
        op_parser = tf_sub.add_parser(operation, help=f'terraform {operation}')
        op_parser.add_argument(
            '-e', '--env',
            default=None,
            help='environment name, selects <env_dir>/<env>.tfvars (.tfbackend for init)'
        )
    tf_sub.add_parser('fmt', help='terraform fmt --recursive')
    unlock_parser = tf_sub.add_parser('unlock', help='terraform force-unlock -force LOCK_ID')
    unlock_parser.add_argument('lock_id', nargs='?', help='lock ID shown by plan/apply')

    # text utilities
    case_parser = subparsers.add_parser('case', help='transform stdin lines to a text case')
    case_parser.add_argument('mode', choices=sorted(TRANSFORMS), help='target case')
    subparsers.add_parser('uuid', help='print a lowercase UUID')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    return build_parser().parse_args(argv)
