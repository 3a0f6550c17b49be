import pytest
import logging
import actions_runtime

INPUT_VARS = ('INPUT_MILLISECONDS', 'INPUT_GITHUB_TOKEN', 'INPUT_GITHUB-TOKEN')


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch):
    """Keeps inputs and event variables of the surrounding CI run out of the tests."""
    for name in INPUT_VARS + ('GITHUB_EVENT_PATH', 'GITHUB_REPOSITORY', 'GITHUB_ACTIONS'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_review():
    """Builds a review item shaped like the GitHub list-reviews response."""
    def _make(login, state, review_id=1):
        return {
            'id': review_id,
            'user': {'login': login} if login is not None else None,
            'state': state,
            'body': '',
        }
    return _make


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Runs the test from an empty checkout directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def reporter(caplog):
    caplog.set_level(logging.DEBUG)
    return actions_runtime.ActionReporter(logging.getLogger('test_reporter'))


@pytest.fixture
def pr_context():
    return actions_runtime.ActionContext({'pull_request': {'number': 7}}, 'octo/widgets')
