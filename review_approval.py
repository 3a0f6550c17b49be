"""
Resolves whether a required reviewer has approved a pull request,
based on the latest review state each reviewer left.
"""

APPROVED = 'APPROVED'


def review_author(review):
    """Returns the login of the review author, or None for deleted accounts."""
    user = review.get('user') or {}
    return user.get('login') or None


def latest_review_states(reviews):
    """
    Folds reviews (oldest first) into a mapping of lower-cased login -> state.
    A later review by the same reviewer overwrites the earlier one.
    """
    states = {}
    for review in reviews:
        login = review_author(review)
        if login:
            states[login.lower()] = review.get('state')
    return states


def is_approved(required_reviewer, reviews):
    states = latest_review_states(reviews)
    # State is compared as received, only logins are case-insensitive
    return states.get(required_reviewer.lower()) == APPROVED
