# Command-line entry point
#
# Execution flow for clone-org:
#   1. parse arguments, load settings
#   2. usage check (no network), tool check, gh login check
#   3. fetch inventory once, clone/update/skip each repository in order
#   4. print the summary table (or a JSON summary record)
#   5. exit 1 if any repository failed
#
# The other subcommands are thin wrappers over core.branch / core.terraform /
# domain.text_case.

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..application.org_sync import (
    USAGE,
    clear_failed_repos,
    sync_org_repos,
    verify_environment,
    write_failed_repos,
)
from ..core import branch, terraform
from ..domain.models import RepoOutcome, SyncSummary
from ..domain.text_case import new_uuid, transform_lines
from ..errors import DevUtilsError, UsageError
from ..infra.config import Settings, load_settings
from ..infra.git_cli import GitCli
from ..infra.github_cli import GitHubCli
from ..infra.logger import log_error, log_info, log_warning, use_stderr
from ..infra.process import terminate_all_tracked_processes
from .args import build_parser, parse_args

EXIT_INTERRUPTED = 130


def print_summary(summary: SyncSummary, start_time: float) -> None:
    """Print the final clone/update summary

    Args:
        summary: counters of the finished run
        start_time: run start (Unix timestamp)
    """
    duration = int(time.time() - start_time)
    minutes, seconds = divmod(duration, 60)

    print()
    log_info("----- Clone/Update Summary -----")
    log_info(f"Total repositories found:   {summary.total}")
    log_info(f"Successfully cloned:        {summary.cloned}")
    log_info(f"Successfully updated:       {summary.updated}")
    log_info(f"Skipped (path exists):      {summary.skipped}")
    if summary.failed > 0:
        log_error(f"Failed operations:          {summary.failed}")
    else:
        log_info(f"Failed operations:          {summary.failed}")
    log_info(f"Elapsed:                    {minutes}m {seconds}s")
    log_info("--------------------------------")

    if summary.failed > 0:
        log_error("some operations failed. Please review the output above.")


def _print_record(record: Dict[str, object]) -> None:
    print(json.dumps(record, ensure_ascii=False), flush=True)


def cmd_clone_org(args: argparse.Namespace, settings: Settings) -> int:
    if not args.org or not args.org.strip():
        raise UsageError("organization name is required", usage=USAGE)

    github = GitHubCli()
    verify_environment(github)

    if args.json:
        use_stderr(True)

    failed_file = Path(args.failed_file) if args.failed_file else None
    if failed_file is not None:
        clear_failed_repos(failed_file)

    on_outcome: Optional[Callable[[RepoOutcome], None]] = None
    if args.json:
        on_outcome = lambda outcome: _print_record(outcome.to_dict())

    start_time = time.time()
    summary = sync_org_repos(
        args.org,
        Path(args.target_dir) if args.target_dir else None,
        host=github,
        vcs=GitCli(),
        limit=args.limit or settings.repo_limit,
        on_outcome=on_outcome,
    )

    if failed_file is not None:
        write_failed_repos(summary, failed_file)

    if args.json:
        _print_record(summary.to_dict())
    elif summary.total > 0:
        print_summary(summary, start_time)

    return summary.exit_code


def cmd_branch(args: argparse.Namespace, settings: Settings) -> int:
    branch.show_current_branch(GitCli())
    return 0


def cmd_rebase(args: argparse.Namespace, settings: Settings) -> int:
    if args.command == 'rebase-main':
        target = 'main'
    elif args.command == 'rebase-master':
        target = 'master'
    else:
        target = args.target or settings.default_branch
    branch.rebase_on(GitCli(), target)
    return 0


def cmd_main(args: argparse.Namespace, settings: Settings) -> int:
    branch.switch_to_branch(GitCli(), settings.default_branch)
    return 0


def cmd_commit(args: argparse.Namespace, settings: Settings) -> int:
    no_verify = args.command == 'force-commit' or getattr(args, 'no_verify', False)
    branch.commit_all(GitCli(), args.message, no_verify=no_verify)
    return 0


def cmd_new(args: argparse.Namespace, settings: Settings) -> int:
    branch.new_branch(GitCli(), args.name)
    return 0


def cmd_status(args: argparse.Namespace, settings: Settings) -> int:
    return 0 if GitCli().status().ok else 1


def cmd_tf(args: argparse.Namespace, settings: Settings) -> int:
    if not args.tf_command:
        raise UsageError("terraform subcommand is required", usage="tf {init,plan,apply,destroy,fmt,unlock}")
    if args.tf_command == 'fmt':
        terraform.fmt()
    elif args.tf_command == 'unlock':
        terraform.unlock(args.lock_id)
    else:
        terraform.run_operation(args.tf_command, args.env, settings.terraform_env_dir)
    return 0


def cmd_case(args: argparse.Namespace, settings: Settings) -> int:
    for line in transform_lines(sys.stdin, args.mode):
        print(line)
    return 0


def cmd_uuid(args: argparse.Namespace, settings: Settings) -> int:
    print(new_uuid())
    return 0


COMMANDS: Dict[str, Callable[[argparse.Namespace, Settings], int]] = {
    'clone-org': cmd_clone_org,
    'clone_org': cmd_clone_org,
    'branch': cmd_branch,
    'rebase': cmd_rebase,
    'rebase-main': cmd_rebase,
    'rebase-master': cmd_rebase,
    'main': cmd_main,
    'commit': cmd_commit,
    'force-commit': cmd_commit,
    'new': cmd_new,
    'status': cmd_status,
    'tf': cmd_tf,
    'case': cmd_case,
    'uuid': cmd_uuid,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point

    Returns:
        exit code (0 success, 1 failure, 130 interrupted)
    """
    args = parse_args(argv)
    if not args.command:
        build_parser().print_help(sys.stderr)
        return 1

    settings = load_settings()
    handler = COMMANDS[args.command]

    try:
        return handler(args, settings)
    except UsageError as e:
        log_error(str(e))
        if e.usage:
            print(f"Usage: dev-utils {e.usage}", file=sys.stderr)
        return 1
    except DevUtilsError as e:
        log_error(str(e))
        return 1
    except KeyboardInterrupt:
        terminate_all_tracked_processes()
        log_warning("interrupted")
        return EXIT_INTERRUPTED


if __name__ == '__main__':
    sys.exit(main())
