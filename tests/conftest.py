"""Shared fixtures for the report tests."""

from unittest.mock import Mock

import pytest

from github_pr_report.items import Item
from github_pr_report.labels import LabelGroup


@pytest.fixture
def atom_item():
    return Item(
        issue_number='63',
        issue_title='Update nan',
        issue_url='https://github.com/atom/keyboard-layout/pull/63',
        repository_name='atom/keyboard-layout',
        repository_url='https://github.com/atom/keyboard-layout',
        user_login='mansona',
        user_url='https://github.com/mansona',
    )


@pytest.fixture
def ember_item():
    return Item(
        issue_number='798',
        issue_title='Ember 4 compatibility',
        issue_url='https://github.com/ember-engines/ember-engines/pull/798',
        repository_name='ember-engines/ember-engines',
        repository_url='https://github.com/ember-engines/ember-engines',
        user_login='BobrImperator',
        user_url='https://github.com/BobrImperator',
    )


@pytest.fixture
def items(atom_item, ember_item):
    return [atom_item, ember_item]


@pytest.fixture
def labels():
    return [LabelGroup(name='Ember', repos=frozenset(['ember-engines/ember-engines']))]


def raw_issue(owner, repo, number, title, login):
    """A search result record shaped like the GitHub REST response."""
    return {
        'html_url': f'https://github.com/{owner}/{repo}/pull/{number}',
        'title': title,
        'number': number,
        'user': {'login': login, 'html_url': f'https://github.com/{login}'},
    }


def make_response(items=None, status_code=200, next_url=None, headers=None, text=''):
    response = Mock()
    response.status_code = status_code
    response.headers = headers or {}
    response.text = text
    response.json.return_value = {'total_count': len(items or []), 'items': items or []}
    response.links = {'next': {'url': next_url, 'rel': 'next'}} if next_url else {}
    return response


class FakeSearch:
    """Serves canned pages per query and records the queries issued."""

    def __init__(self, pages_by_query=None, error=None):
        self.pages_by_query = pages_by_query or {}
        self.error = error
        self.queries = []
        self.closed = False

    def close(self):
        self.closed = True

    def iter_pages(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        for page in self.pages_by_query.get(query, []):
            yield page
