"""
GitHub Actions runtime helpers: action inputs, the triggering event context
and a logging based reporter that emits workflow commands.
"""
import json
import logging
import os
import sys


class InputError(Exception):
    pass


class ContextError(Exception):
    pass


def _input_env_names(name):
    upper = name.strip().upper()
    return [
        'INPUT_' + upper.replace(' ', '_'),
        'INPUT_' + upper.replace(' ', '_').replace('-', '_'),
    ]


def get_input(name, required=False, environ=None):
    """Reads an action input from INPUT_<NAME>, stripped of whitespace."""
    if environ is None:
        environ = os.environ

    value = ''
    for env_name in _input_env_names(name):
        value = environ.get(env_name, '').strip()
        if value:
            break

    if required and not value:
        raise InputError(f"Input required and not supplied: {name}")
    return value


class ActionContext:
    """The event payload and repository the workflow was triggered for."""

    def __init__(self, payload=None, repository=None):
        self.payload = payload or {}
        self.repository = repository

    @property
    def pr_number(self):
        pull_request = self.payload.get('pull_request') or {}
        return pull_request.get('number')

    @property
    def repo(self):
        owner, _, name = (self.repository or '').partition('/')
        if not owner or not name or '/' in name:
            raise ContextError(
                "context.repo requires a GITHUB_REPOSITORY environment variable like 'owner/repo'"
            )
        return owner, name


def load_context(environ=None):
    if environ is None:
        environ = os.environ

    payload = {}
    event_path = environ.get('GITHUB_EVENT_PATH')
    if event_path and os.path.exists(event_path):
        with open(event_path, encoding='utf-8') as f:
            payload = json.load(f)

    return ActionContext(payload, environ.get('GITHUB_REPOSITORY'))


def running_in_actions(environ=None):
    if environ is None:
        environ = os.environ
    return environ.get('GITHUB_ACTIONS') == 'true'


def escape_data(message):
    return message.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


class WorkflowCommandFormatter(logging.Formatter):
    """Formats records as ::debug::, ::warning:: and ::error:: workflow commands."""

    COMMANDS = {
        logging.DEBUG: 'debug',
        logging.WARNING: 'warning',
        logging.ERROR: 'error',
        logging.CRITICAL: 'error',
    }

    def format(self, record):
        message = super().format(record)
        command = self.COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_data(message)}"


def configure_logging(verbose=False, environ=None):
    in_actions = running_in_actions(environ)
    if in_actions:
        # The runner reads workflow commands from stdout
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(WorkflowCommandFormatter('%(message)s'))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('%(message)s'))

    level = logging.DEBUG if (in_actions or verbose) else logging.INFO
    logging.basicConfig(level=level, handlers=[handler], force=True)


class ActionReporter:
    """Outcome sink for the check. set_failed marks the run failed without raising."""

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self.failed = False

    def info(self, message):
        self.logger.info(message)

    def debug(self, message):
        self.logger.debug(message)

    def warning(self, message):
        self.logger.warning(message)

    def set_failed(self, message):
        self.failed = True
        self.logger.error(message)
