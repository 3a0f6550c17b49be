#!/usr/bin/env python3
"""
CI check that fails a pull request unless the reviewer listed in the
REVIEWERS file has approved it.

Runs as a GitHub Action step (see action.yml) or locally:

    GH_TOKEN=... python check_approval.py --pr-number 42 --repository owner/repo
"""
import argparse
import logging
import sys
import time
from datetime import datetime

import actions_runtime
import gh_client
from review_approval import is_approved
from wait import parse_milliseconds, wait

DEFAULT_MILLISECONDS = '100'
REVIEWERS_FILE = 'REVIEWERS'

logger = logging.getLogger(__name__)


class ReviewersFileError(Exception):
    pass


def read_required_reviewer(path=REVIEWERS_FILE):
    """Returns the trimmed reviewer login stored in the REVIEWERS file."""
    try:
        # utf-8-sig drops a leading byte-order mark
        with open(path, encoding='utf-8-sig') as f:
            reviewer = f.read().strip()
    except (OSError, UnicodeDecodeError) as e:
        raise ReviewersFileError(f"{path} file not found or unreadable.") from e

    if not reviewer:
        raise ReviewersFileError(f"{path} file is empty.")
    return reviewer


def _now():
    return datetime.now().astimezone().strftime('%H:%M:%S %Z')


def run(reporter, context, get_input=actions_runtime.get_input,
        list_reviews=gh_client.list_reviews, sleep=time.sleep,
        reviewers_file=REVIEWERS_FILE):
    """
    Runs the check, reporting every outcome through reporter.
    Returns True only when the required reviewer has approved the PR.
    Never raises: unexpected errors are reported with set_failed.
    """
    try:
        ms = get_input('milliseconds') or DEFAULT_MILLISECONDS
        reporter.info(f"Waiting for {ms} milliseconds...")
        reporter.debug(_now())
        wait(parse_milliseconds(ms), sleep=sleep)
        reporter.debug(_now())

        pr_number = context.pr_number
        if not pr_number:
            reporter.warning('No PR number found. This action is meant to run on PRs.')
            return False

        try:
            reviewer = read_required_reviewer(reviewers_file)
        except ReviewersFileError as e:
            reporter.set_failed(str(e))
            return False

        token = get_input('github-token', required=True)
        owner, repo = context.repo
        reviews = list_reviews(owner, repo, pr_number, token)

        if not is_approved(reviewer, reviews):
            reporter.set_failed(f"{reviewer} has not approved this PR.")
            return False

        reporter.info(f"✅ PR #{pr_number} has been approved by {reviewer}.")
        return True
    except Exception as e:
        logger.debug("Check aborted", exc_info=True)
        reporter.set_failed(str(e) or e.__class__.__name__)
        return False


def main(argv=None):
    """Main entry point for the approval check CLI."""
    parser = argparse.ArgumentParser(
        description='Fail unless the reviewer in the REVIEWERS file approved the PR')
    parser.add_argument('--reviewers-file', default=REVIEWERS_FILE,
                        help='File containing the required reviewer login')
    parser.add_argument('--pr-number', type=int,
                        help='PR number (defaults to the triggering pull_request event)')
    parser.add_argument('--repository',
                        help='owner/repo (defaults to GITHUB_REPOSITORY)')
    parser.add_argument('--verbose', action='store_true', help='Show debug output')
    args = parser.parse_args(argv)

    actions_runtime.configure_logging(verbose=args.verbose)
    reporter = actions_runtime.ActionReporter(logger)

    try:
        context = actions_runtime.load_context()
    except (OSError, ValueError) as e:
        reporter.set_failed(f"Could not read the event payload: {e}")
        sys.exit(1)

    if args.pr_number is not None:
        context.payload = {**context.payload, 'pull_request': {'number': args.pr_number}}
    if args.repository:
        context.repository = args.repository

    run(reporter, context, reviewers_file=args.reviewers_file)
    sys.exit(1 if reporter.failed else 0)


if __name__ == "__main__":
    main()
