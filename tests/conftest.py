"""
Shared fixtures.

`client` is a Mock accounting client whose `call` answers from a dict of
operation name -> result (or exception, or callable).
"""

import pytest
from unittest.mock import Mock


def make_client(responses=None):
    """Build a mock client answering remote operations from `responses`."""
    responses = dict(responses or {})
    
    def _call(operation, **params):
        answer = responses.get(operation)
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            return answer(**params)
        return answer
    
    client = Mock()
    client.call.side_effect = _call
    client.responses = responses
    return client


def operations(client):
    """Names of the remote operations a mock client received, in order."""
    return [c.args[0] for c in client.call.call_args_list]


@pytest.fixture
def client():
    return make_client()
