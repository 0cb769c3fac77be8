"""
Shared pytest fixtures.
"""
import pytest
import config


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read configuration from its own environment."""
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def mock_context():
    """Mock Lambda context."""
    class MockContext:
        def __init__(self):
            self.function_name = 'support-operation'
            self.memory_limit_in_mb = 256
            self.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:support-operation'
            self.aws_request_id = 'test-request-id'

    return MockContext()
