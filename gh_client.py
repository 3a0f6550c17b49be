"""
Thin wrapper around the gh CLI for the GitHub REST calls the check needs.
"""
import json
import logging
import os
import subprocess

logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    pass


def run_gh_api(path, token=None, paginate=False):
    """Executes a GitHub API call using the gh CLI and returns the JSON response."""
    cmd = ["gh", "api", path]
    if paginate:
        cmd.append("--paginate")

    env = os.environ.copy()
    if token:
        env["GH_TOKEN"] = token

    logger.debug(f"Calling GitHub API: {path}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=True, env=env)
    except FileNotFoundError:
        raise GitHubAPIError("gh CLI not found. It is required to call the GitHub API.")
    except subprocess.CalledProcessError as e:
        raise GitHubAPIError(f"Error calling GitHub API: {(e.stderr or '').strip()}")

    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError:
        raise GitHubAPIError(f"Error decoding JSON from GitHub API at {path}")


def list_reviews(owner, repo, pr_number, token=None):
    """Lists the reviews of a pull request, oldest first (first page only)."""
    return run_gh_api(f"repos/{owner}/{repo}/pulls/{pr_number}/reviews", token=token)
